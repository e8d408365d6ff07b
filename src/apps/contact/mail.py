"""Contact notification composition and dispatch."""

import logging
from collections.abc import Callable
from email.utils import make_msgid

from django.core.mail import EmailMultiAlternatives
from django.core.mail.utils import DNS_NAME
from django.utils.html import format_html

from .conf import ContactSettings
from .submissions import ContactSubmission
from .transports import MailTransport, SendReceipt, resolve_transport

logger = logging.getLogger(__name__)

SUBJECT = "رسالة جديدة من نموذج التواصل"

HTML_BODY = (
    '<div style="font-family:system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,Cairo,sans-serif;line-height:1.6">'
    "<h2>رسالة جديدة</h2>"
    "<ul>"
    "<li><b>الاسم:</b> {} {}</li>"
    "<li><b>البريد:</b> {}</li>"
    "<li><b>الهاتف:</b> {}</li>"
    "<li><b>نوع المشروع:</b> {}</li>"
    "</ul>"
    '<pre style="white-space:pre-wrap;background:#f7f7f7;padding:12px;border-radius:8px">{}</pre>'
    "</div>"
)


def build_text_body(submission: ContactSubmission) -> str:
    return (
        f"الاسم: {submission.full_name}\n"
        f"البريد: {submission.email}\n"
        f"الهاتف: {submission.phone}\n"
        f"نوع المشروع: {submission.project_type_display}\n"
        f"---\n"
        f"{submission.message}"
    )


def build_html_body(submission: ContactSubmission) -> str:
    return format_html(
        HTML_BODY,
        submission.first_name,
        submission.last_name,
        submission.email,
        submission.phone,
        submission.project_type_display,
        submission.message,
    )


def compose_contact_message(submission: ContactSubmission, config: ContactSettings) -> EmailMultiAlternatives:
    """
    Build the notification for a validated submission.

    Replies go straight to the submitter. The Message-ID is fixed up front so
    it can be logged once the network transport accepts the message.
    """
    msg = EmailMultiAlternatives(
        subject=SUBJECT,
        body=build_text_body(submission),
        from_email=config.sender,
        to=[config.recipient_for(submission.email)],
        reply_to=[submission.email],
        headers={"Message-ID": make_msgid(domain=str(DNS_NAME))},
    )
    msg.attach_alternative(build_html_body(submission), "text/html")
    return msg


def dispatch_contact_mail(
    submission: ContactSubmission,
    config: ContactSettings,
    *,
    resolver: Callable[[ContactSettings], MailTransport] = resolve_transport,
) -> SendReceipt:
    """
    Resolve a transport, send the notification and log the outcome.

    Exceptions raised while sending propagate to the caller; only transport
    verification falls back to the console transport.
    """
    transport = resolver(config)
    message = compose_contact_message(submission, config)
    try:
        receipt = transport.send(message)
    finally:
        transport.close()

    if receipt.raw:
        logger.info("Mail (console):\n%s", receipt.raw)
    else:
        logger.info("Mail queued: %s", receipt.message_id)
    return receipt
