"""Email ISV Tools — deliverability verification."""

from .base import CapabilityGroup, Endpoint, enum, string


class EmailISVGroup(CapabilityGroup):
    name = "email_isv"

    TOOL_NAMES = ("verify_email",)

    ENDPOINTS = (
        Endpoint(
            "verify_email", "Verify an email address (or a contact's email) for deliverability",
            "POST", "/email/verify",
            {
                "type": enum("What verify refers to", ["email", "contact"]),
                "verify": string("Email address or contact ID"),
            },
            required=("type", "verify"), location="query",
        ),
    )
