"""
Mail transports for contact notifications.

Two transports share one interface:

  1. ``NetworkTransport`` delivers over SMTP using Django's SMTP backend.
  2. ``DiscardTransport`` renders the message into an in-memory buffer with
     Django's console backend so it can be written to the log instead.

``resolve_transport`` builds a fresh network transport for every request,
verifies it, and falls back to the discard transport when the mail server
cannot be reached or rejects the credentials.
"""

import io
import logging
import re
from dataclasses import dataclass
from typing import Protocol

from django.core.mail import EmailMessage
from django.core.mail.backends.console import EmailBackend as ConsoleEmailBackend
from django.core.mail.backends.smtp import EmailBackend as SMTPEmailBackend
from django.core.mail.utils import DNS_NAME

from .conf import ContactSettings
from .exceptions import DispatchError

logger = logging.getLogger(__name__)

_MASK_PATTERN = re.compile(r".(?=.{3})")

# Django's console backend closes every message with this rule
_CONSOLE_SEPARATOR = "-" * 79 + "\n"


def mask_identity(value: str) -> str:
    """Replace all but the last three characters with ``*``."""
    return _MASK_PATTERN.sub("*", value or "")


@dataclass(frozen=True)
class VerifyResult:
    """Outcome of a transport connectivity/authentication check."""

    ok: bool
    reason: str = ""

    @classmethod
    def success(cls) -> "VerifyResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> "VerifyResult":
        return cls(ok=False, reason=reason)


@dataclass(frozen=True)
class SendReceipt:
    """What a transport reports after sending. ``raw`` is only set for buffered sends."""

    transport: str
    message_id: str = ""
    raw: str = ""


class MailTransport(Protocol):
    name: str

    def verify(self) -> VerifyResult: ...

    def send(self, message: EmailMessage) -> SendReceipt: ...

    def close(self) -> None: ...


class OpportunisticTLSBackend(SMTPEmailBackend):
    """
    SMTP backend that upgrades a plain connection with STARTTLS only when
    the server advertises it. Implicit TLS (``use_ssl``) is unaffected.
    """

    def open(self) -> bool:
        if self.connection:
            return False

        connection_params = {"local_hostname": DNS_NAME.get_fqdn()}
        if self.timeout is not None:
            connection_params["timeout"] = self.timeout
        if self.use_ssl:
            connection_params["context"] = self.ssl_context

        self.connection = self.connection_class(self.host, self.port, **connection_params)
        if not self.use_ssl:
            self.connection.ehlo_or_helo_if_needed()
            if self.connection.has_extn("starttls"):
                self.connection.starttls(context=self.ssl_context)
        if self.username and self.password:
            self.connection.login(self.username, self.password)
        return True


class NetworkTransport:
    """SMTP delivery. The connection opened by ``verify`` is reused by ``send``."""

    name = "smtp"

    def __init__(self, config: ContactSettings) -> None:
        self.config = config
        self.backend = OpportunisticTLSBackend(
            host=config.smtp_host,
            port=config.smtp_port,
            username=config.smtp_user,
            password=config.smtp_password,
            use_tls=False,
            use_ssl=config.use_ssl,
            timeout=config.smtp_timeout,
            fail_silently=False,
        )

    def verify(self) -> VerifyResult:
        try:
            self.backend.open()
        except Exception as exc:
            # Any handshake or login failure means "use the console transport"
            self.close()
            return VerifyResult.failure(str(exc) or exc.__class__.__name__)
        return VerifyResult.success()

    def send(self, message: EmailMessage) -> SendReceipt:
        try:
            sent = self.backend.send_messages([message])
        except OSError as exc:
            raise DispatchError(f"SMTP send failed: {exc}") from exc
        if not sent:
            raise DispatchError("SMTP server did not accept the message")
        return SendReceipt(transport=self.name, message_id=message.extra_headers.get("Message-ID", ""))

    def close(self) -> None:
        try:
            self.backend.close()
        except OSError:
            # The session is being discarded either way
            logger.debug("Error while closing SMTP connection to %s", self.config.smtp_host, exc_info=True)


class DiscardTransport:
    """Renders messages to an in-memory buffer; nothing leaves the process."""

    name = "console"

    def __init__(self) -> None:
        self.stream = io.StringIO()
        self.backend = ConsoleEmailBackend(stream=self.stream, fail_silently=False)

    def verify(self) -> VerifyResult:
        return VerifyResult.success()

    def send(self, message: EmailMessage) -> SendReceipt:
        start = self.stream.tell()
        self.backend.send_messages([message])
        raw = self.stream.getvalue()[start:].removesuffix(_CONSOLE_SEPARATOR).rstrip("\n")
        return SendReceipt(
            transport=self.name,
            message_id=message.extra_headers.get("Message-ID", ""),
            raw=raw,
        )

    def close(self) -> None:
        self.stream.close()


def resolve_transport(
    config: ContactSettings,
    *,
    transport_class: type = NetworkTransport,
) -> MailTransport:
    """
    Return a verified network transport, or a discard transport if verification fails.

    Only verification is guarded here: a transport returned by this function
    may still fail at send time, and that failure is the caller's to handle.
    """
    transport = transport_class(config)
    result = transport.verify()
    if result.ok:
        logger.info(
            "SMTP ready on %s:%s as %s",
            config.smtp_host,
            config.smtp_port,
            mask_identity(config.smtp_user) or "(no-auth)",
        )
        return transport

    transport.close()
    logger.warning("SMTP verify failed: %s", result.reason)
    logger.warning("Falling back to console transport (no real email sent).")
    return DiscardTransport()
