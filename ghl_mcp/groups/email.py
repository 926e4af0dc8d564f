"""Email Tools — campaigns and email builder templates."""

from .base import CapabilityGroup, Endpoint, enum, number, string


class EmailGroup(CapabilityGroup):
    name = "email"

    TOOL_NAMES = (
        "get_email_campaigns", "create_email_template", "get_email_templates",
        "update_email_template", "delete_email_template",
    )

    ENDPOINTS = (
        Endpoint(
            "get_email_campaigns", "List email campaigns",
            "GET", "/emails/schedule",
            {
                "status": enum("Campaign status", ["active", "pause", "complete", "cancelled", "retry", "draft", "resend-scheduled"]),
                "limit": number("Maximum results (default 10)", default=10),
                "offset": number("Results to skip", default=0),
            },
            location="query",
        ),
        Endpoint(
            "create_email_template", "Create an email builder template",
            "POST", "/emails/builder",
            {
                "title": string("Template title"),
                "html": string("Template HTML"),
                "isPlainText": string("Plain-text flag"),
            },
            required=("title", "html"), fixed={"type": "html"}, location="body",
        ),
        Endpoint(
            "get_email_templates", "List email builder templates",
            "GET", "/emails/builder",
            {"limit": number("Maximum results (default 10)", default=10), "offset": number("Results to skip", default=0)},
            location="query",
        ),
        Endpoint(
            "update_email_template", "Update an email builder template's HTML",
            "POST", "/emails/builder/data",
            {
                "templateId": string("Template ID"),
                "html": string("New HTML"),
                "previewText": string("Preview text"),
            },
            required=("templateId", "html"), fixed={"editorType": "html", "updatedBy": "ghl-mcp"}, location="body",
        ),
        Endpoint(
            "delete_email_template", "Delete an email builder template",
            "DELETE", "/emails/builder/{locationId}/{templateId}",
        ),
    )
