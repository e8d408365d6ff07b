"""Contact app views."""

import json
import logging

from asgiref.sync import sync_to_async
from django.core.exceptions import RequestDataTooBig
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .conf import get_contact_settings
from .mail import dispatch_contact_mail
from .submissions import PROJECT_TYPES, ContactSubmission, is_bot_submission
from .validators import validate_submission

logger = logging.getLogger(__name__)

RECEIVED_MESSAGE = "تم الاستلام."
SUCCESS_MESSAGE = "تم استلام رسالتك بنجاح"
FAILURE_MESSAGE = "خطأ في الإرسال"
INVALID_BODY_MESSAGE = "صيغة الطلب غير صالحة."
BODY_TOO_LARGE_MESSAGE = "حجم الطلب أكبر من المسموح."


class BadPayload(Exception):
    """The request body could not be decoded."""


def _read_payload(request: HttpRequest) -> dict:
    """Decode a JSON or form-encoded body into a plain mapping."""
    if request.content_type == "application/json":
        if not request.body:
            return {}
        try:
            data = json.loads(request.body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise BadPayload(str(exc)) from exc
        return data if isinstance(data, dict) else {}
    return request.POST.dict()


class HealthView(View):
    """Liveness check."""

    def get(self, request: HttpRequest) -> JsonResponse:
        ts = timezone.now().isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return JsonResponse({"ok": True, "ts": ts})


@method_decorator(csrf_exempt, name="dispatch")
class ContactSubmitView(View):
    """Accept a contact form post and relay it by email."""

    async def post(self, request: HttpRequest) -> JsonResponse:
        try:
            payload = _read_payload(request)
        except RequestDataTooBig:
            return JsonResponse({"ok": False, "message": BODY_TOO_LARGE_MESSAGE}, status=413)
        except BadPayload as exc:
            logger.info("Rejected contact post with undecodable body: %s", exc)
            return JsonResponse(
                {"ok": False, "message": INVALID_BODY_MESSAGE, "errors": [INVALID_BODY_MESSAGE]},
                status=400,
            )

        # Bots that fill the hidden field get the same answer as people do
        if is_bot_submission(payload):
            logger.info("Discarded honeypot submission")
            return JsonResponse({"ok": True, "message": RECEIVED_MESSAGE})

        submission = ContactSubmission.from_payload(payload)
        errors = validate_submission(submission, PROJECT_TYPES)
        if errors:
            return JsonResponse({"ok": False, "message": errors[0], "errors": errors}, status=400)

        try:
            await sync_to_async(dispatch_contact_mail)(submission, get_contact_settings())
        except Exception:
            logger.exception("Failed to dispatch contact submission")
            return JsonResponse({"ok": False, "message": FAILURE_MESSAGE}, status=500)

        return JsonResponse({"ok": True, "message": SUCCESS_MESSAGE})
