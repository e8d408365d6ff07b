"""Contact submission validation."""

from collections.abc import Collection

from .submissions import PROJECT_TYPES, ContactSubmission

FIRST_NAME_REQUIRED = "الاسم الأول مطلوب."
LAST_NAME_REQUIRED = "الاسم الأخير مطلوب."
EMAIL_REQUIRED = "البريد الإلكتروني مطلوب."
PHONE_REQUIRED = "رقم الهاتف مطلوب."
MESSAGE_REQUIRED = "نص الرسالة مطلوب."
INVALID_PROJECT_TYPE = "قيمة نوع المشروع غير صالحة."


def _is_filled(value) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_submission(
    submission: ContactSubmission,
    project_types: Collection[str] = PROJECT_TYPES,
) -> list[str]:
    """
    Return the validation errors for a submission, in field order.

    An empty list means the submission can be dispatched. Callers show the
    first error to the user and may expose the full list alongside it.
    """
    errors: list[str] = []

    if not _is_filled(submission.first_name):
        errors.append(FIRST_NAME_REQUIRED)
    if not _is_filled(submission.last_name):
        errors.append(LAST_NAME_REQUIRED)
    if not _is_filled(submission.email):
        errors.append(EMAIL_REQUIRED)
    if not _is_filled(submission.phone):
        errors.append(PHONE_REQUIRED)
    if not _is_filled(submission.message):
        errors.append(MESSAGE_REQUIRED)

    project_type = submission.project_type
    if project_type and (not isinstance(project_type, str) or project_type not in project_types):
        errors.append(INVALID_PROJECT_TYPE)

    return errors
