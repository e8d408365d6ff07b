"""Contact submission record."""

from dataclasses import dataclass
from typing import Any

PROJECT_TYPES = frozenset(
    {
        "landing",
        "website",
        "ecommerce",
        "info-app",
        "booking-app",
        "custom",
    }
)


@dataclass(frozen=True)
class ContactSubmission:
    """
    A single contact-form submission, alive for one request only.

    Field values are kept exactly as posted. Required fields are only
    guaranteed to be non-blank strings after validation.
    """

    first_name: Any = None
    last_name: Any = None
    email: Any = None
    phone: Any = None
    project_type: Any = ""
    message: Any = None

    @classmethod
    def from_payload(cls, payload: dict) -> "ContactSubmission":
        """Build a submission from a decoded JSON object or form QueryDict."""
        return cls(
            first_name=payload.get("firstName"),
            last_name=payload.get("lastName"),
            email=payload.get("email"),
            phone=payload.get("phone"),
            project_type=payload.get("projectType", ""),
            message=payload.get("message"),
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def project_type_display(self) -> str:
        return self.project_type or "-"


def is_bot_submission(payload: dict) -> bool:
    """Return True when the hidden ``company`` honeypot field was filled in."""
    company = payload.get("company")
    return isinstance(company, str) and company.strip() != ""
