"""
Conversation Tools — SMS/email messaging, conversation CRUD, call recordings.

20 tools over /conversations/*.
"""

from .base import CapabilityGroup, Endpoint, array, boolean, enum, number, obj, string

_MESSAGE_TYPES = ["SMS", "Email", "WhatsApp", "GMB", "IG", "FB", "Custom", "Live_Chat"]


class ConversationGroup(CapabilityGroup):
    name = "conversations"

    TOOL_NAMES = (
        "send_sms", "send_email", "search_conversations", "get_conversation",
        "create_conversation", "update_conversation", "delete_conversation", "get_recent_messages",
        "get_email_message", "get_message", "upload_message_attachments", "update_message_status",
        "add_inbound_message", "add_outbound_call",
        "get_message_recording", "get_message_transcription", "download_transcription",
        "cancel_scheduled_message", "cancel_scheduled_email",
        "live_chat_typing",
    )

    ENDPOINTS = (
        Endpoint(
            "send_sms", "Send an SMS message to a contact",
            "POST", "/conversations/messages",
            {
                "contactId": string("Recipient contact ID"),
                "message": string("SMS text (max 1600 characters)"),
                "fromNumber": string("Sending phone number"),
            },
            required=("contactId", "message"), fixed={"type": "SMS"},
        ),
        Endpoint(
            "send_email", "Send an email to a contact",
            "POST", "/conversations/messages",
            {
                "contactId": string("Recipient contact ID"),
                "subject": string("Email subject"),
                "message": string("Plain-text body"),
                "html": string("HTML body"),
                "emailFrom": string("Sender address"),
                "emailCc": array("CC addresses"),
                "emailBcc": array("BCC addresses"),
                "attachments": array("Attachment URLs"),
            },
            required=("contactId", "subject"), fixed={"type": "Email"},
        ),
        Endpoint(
            "search_conversations", "Search conversations with filters",
            "GET", "/conversations/search",
            {
                "contactId": string("Filter by contact"),
                "query": string("Free-text search"),
                "status": enum("Conversation status", ["all", "read", "unread", "starred", "recents"]),
                "limit": number("Maximum results (default 20)", default=20),
                "assignedTo": string("Filter by assigned user"),
            },
            location="query",
        ),
        Endpoint(
            "get_conversation", "Get a conversation with its recent messages",
            "GET", "/conversations/{conversationId}",
        ),
        Endpoint(
            "create_conversation", "Create a new conversation for a contact",
            "POST", "/conversations/", {"contactId": string("Contact ID")},
            required=("contactId",), location="body",
        ),
        Endpoint(
            "update_conversation", "Update conversation properties (read state, star, feedback)",
            "PUT", "/conversations/{conversationId}",
            {"unreadCount": number("Unread message count"), "starred": boolean("Starred"), "feedback": obj("Feedback payload")},
            location="body",
        ),
        Endpoint("delete_conversation", "Delete a conversation", "DELETE", "/conversations/{conversationId}"),
        Endpoint(
            "get_recent_messages", "List the most recent conversations and messages",
            "GET", "/conversations/search",
            {
                "limit": number("Maximum conversations (default 10)", default=10),
                "status": enum("Conversation status", ["all", "unread"]),
            },
            location="query",
        ),
        Endpoint(
            "get_email_message", "Get an email message by ID",
            "GET", "/conversations/messages/email/{emailMessageId}",
        ),
        Endpoint("get_message", "Get a message by ID", "GET", "/conversations/messages/{messageId}"),
        Endpoint(
            "upload_message_attachments", "Upload file attachments for a conversation message",
            "POST", "/conversations/messages/upload",
            {"conversationId": string("Conversation ID"), "attachmentUrls": array("File URLs to attach")},
            required=("conversationId", "attachmentUrls"),
        ),
        Endpoint(
            "update_message_status", "Update the delivery status of a message",
            "PUT", "/conversations/messages/{messageId}/status",
            {
                "status": enum("New status", ["delivered", "failed", "pending", "read"]),
                "error": obj("Error details for failed messages"),
                "emailMessageId": string("Email message ID"),
                "recipients": array("Recipients"),
            },
            required=("status",),
        ),
        Endpoint(
            "add_inbound_message", "Record an inbound message received outside GoHighLevel",
            "POST", "/conversations/messages/inbound",
            {
                "type": enum("Message channel", _MESSAGE_TYPES),
                "conversationId": string("Conversation ID"),
                "conversationProviderId": string("Conversation provider ID"),
                "message": string("Message body"),
                "html": string("HTML body (email)"),
                "subject": string("Subject (email)"),
                "emailFrom": string("Sender address"),
                "emailTo": string("Recipient address"),
                "altId": string("External message ID"),
                "date": string("Message date (ISO 8601)"),
            },
            required=("type", "conversationId", "conversationProviderId"),
        ),
        Endpoint(
            "add_outbound_call", "Record an outbound call in a conversation",
            "POST", "/conversations/messages/outbound",
            {
                "conversationId": string("Conversation ID"),
                "conversationProviderId": string("Conversation provider ID"),
                "to": string("Called phone number"),
                "from": string("Calling phone number"),
                "status": enum("Call status", ["pending", "completed", "answered", "busy", "no-answer", "failed", "canceled", "voicemail"]),
                "attachments": array("Recording URLs"),
                "altId": string("External call ID"),
                "date": string("Call date (ISO 8601)"),
            },
            required=("conversationId", "conversationProviderId", "to", "from", "status"),
            fixed={"type": "Call"},
        ),
        Endpoint(
            "get_message_recording", "Get the call recording for a message",
            "GET", "/conversations/messages/{messageId}/locations/{locationId}/recording",
        ),
        Endpoint(
            "get_message_transcription", "Get the call transcription for a message",
            "GET", "/conversations/locations/{locationId}/messages/{messageId}/transcription",
        ),
        Endpoint(
            "download_transcription", "Download the call transcription as text",
            "GET", "/conversations/locations/{locationId}/messages/{messageId}/transcription/download",
        ),
        Endpoint(
            "cancel_scheduled_message", "Cancel a scheduled message",
            "DELETE", "/conversations/messages/{messageId}/schedule",
        ),
        Endpoint(
            "cancel_scheduled_email", "Cancel a scheduled email",
            "DELETE", "/conversations/messages/email/{emailMessageId}/schedule",
        ),
        Endpoint(
            "live_chat_typing", "Show or hide the typing indicator in a live chat",
            "POST", "/conversations/providers/live-chat/typing",
            {
                "visitorId": string("Live chat visitor ID"),
                "conversationId": string("Conversation ID"),
                "isTyping": boolean("Typing state"),
            },
            required=("visitorId", "conversationId", "isTyping"), location="body",
        ),
    )
