"""
Contact Tools — contacts, tags, tasks, notes, followers, campaigns, workflows.

31 tools over /contacts/*.
"""

from urllib.parse import quote

from .base import CapabilityGroup, Endpoint, array, boolean, enum, number, string

_CONTACT_FIELDS = {
    "firstName": string("Contact first name"),
    "lastName": string("Contact last name"),
    "name": string("Full name (alternative to first/last)"),
    "email": string("Contact email address"),
    "phone": string("Contact phone number"),
    "companyName": string("Company name"),
    "source": string("Lead source"),
    "tags": array("Tags to assign"),
    "customFields": array("Custom field values ({id, value})", items="object"),
}

_TASK_FIELDS = {
    "title": string("Task title"),
    "body": string("Task description"),
    "dueDate": string("Due date (ISO 8601)"),
    "completed": boolean("Whether the task is completed"),
    "assignedTo": string("User ID the task is assigned to"),
}


class ContactGroup(CapabilityGroup):
    name = "contacts"

    TOOL_NAMES = (
        "create_contact", "search_contacts", "get_contact", "update_contact",
        "add_contact_tags", "remove_contact_tags", "delete_contact",
        "get_contact_tasks", "create_contact_task", "get_contact_task", "update_contact_task",
        "delete_contact_task", "update_task_completion",
        "get_contact_notes", "create_contact_note", "get_contact_note", "update_contact_note",
        "delete_contact_note",
        "upsert_contact", "get_duplicate_contact", "get_contacts_by_business", "get_contact_appointments",
        "bulk_update_contact_tags", "bulk_update_contact_business",
        "add_contact_followers", "remove_contact_followers",
        "add_contact_to_campaign", "remove_contact_from_campaign", "remove_contact_from_all_campaigns",
        "add_contact_to_workflow", "remove_contact_from_workflow",
    )

    ENDPOINTS = (
        Endpoint(
            "create_contact", "Create a new contact in GoHighLevel",
            "POST", "/contacts/", _CONTACT_FIELDS, required=("email",), location="body",
        ),
        Endpoint(
            "search_contacts", "Search contacts by name, email, phone or free-text query",
            "POST", "/contacts/search",
            {
                "query": string("Free-text search query"),
                "pageLimit": number("Maximum results (default 25)", default=25),
                "startAfterId": string("Cursor for the next page"),
                "filters": array("Advanced filter objects", items="object"),
            },
            location="body",
        ),
        Endpoint("get_contact", "Get a contact by ID", "GET", "/contacts/{contactId}"),
        Endpoint(
            "update_contact", "Update an existing contact",
            "PUT", "/contacts/{contactId}", _CONTACT_FIELDS,
        ),
        Endpoint(
            "add_contact_tags", "Add tags to a contact",
            "POST", "/contacts/{contactId}/tags", {"tags": array("Tags to add")},
            required=("tags",),
        ),
        Endpoint(
            "remove_contact_tags", "Remove tags from a contact",
            "DELETE", "/contacts/{contactId}/tags", {"tags": array("Tags to remove")},
            required=("tags",), send_body=True,
        ),
        Endpoint("delete_contact", "Delete a contact", "DELETE", "/contacts/{contactId}"),

        # Tasks
        Endpoint("get_contact_tasks", "List all tasks for a contact", "GET", "/contacts/{contactId}/tasks"),
        Endpoint(
            "create_contact_task", "Create a task for a contact",
            "POST", "/contacts/{contactId}/tasks", _TASK_FIELDS, required=("title", "dueDate"),
        ),
        Endpoint("get_contact_task", "Get a single contact task", "GET", "/contacts/{contactId}/tasks/{taskId}"),
        Endpoint(
            "update_contact_task", "Update a contact task",
            "PUT", "/contacts/{contactId}/tasks/{taskId}", _TASK_FIELDS,
        ),
        Endpoint("delete_contact_task", "Delete a contact task", "DELETE", "/contacts/{contactId}/tasks/{taskId}"),
        Endpoint(
            "update_task_completion", "Mark a contact task as completed or not completed",
            "PUT", "/contacts/{contactId}/tasks/{taskId}/completed",
            {"completed": boolean("Completion status")}, required=("completed",),
        ),

        # Notes
        Endpoint("get_contact_notes", "List all notes for a contact", "GET", "/contacts/{contactId}/notes"),
        Endpoint(
            "create_contact_note", "Create a note for a contact",
            "POST", "/contacts/{contactId}/notes",
            {"body": string("Note content"), "userId": string("Author user ID")}, required=("body",),
        ),
        Endpoint("get_contact_note", "Get a single contact note", "GET", "/contacts/{contactId}/notes/{noteId}"),
        Endpoint(
            "update_contact_note", "Update a contact note",
            "PUT", "/contacts/{contactId}/notes/{noteId}",
            {"body": string("Note content"), "userId": string("Author user ID")}, required=("body",),
        ),
        Endpoint("delete_contact_note", "Delete a contact note", "DELETE", "/contacts/{contactId}/notes/{noteId}"),

        # Advanced
        Endpoint(
            "upsert_contact", "Create a contact or update the existing one matched by email/phone",
            "POST", "/contacts/upsert", _CONTACT_FIELDS, location="body",
        ),
        Endpoint(
            "get_duplicate_contact", "Find a duplicate contact by email or phone",
            "GET", "/contacts/search/duplicate",
            {"email": string("Email to check"), "number": string("Phone number to check")},
            location="query",
        ),
        Endpoint(
            "get_contacts_by_business", "List contacts associated with a business",
            "GET", "/contacts/business/{businessId}",
            {"limit": number("Maximum results"), "skip": number("Results to skip"), "query": string("Search query")},
            location="query",
        ),
        Endpoint(
            "get_contact_appointments", "List appointments booked for a contact",
            "GET", "/contacts/{contactId}/appointments",
        ),

        # Bulk
        Endpoint(
            "bulk_update_contact_tags", "Add or remove tags on many contacts at once",
            "POST", "/contacts/bulk/tags/update/{type}",
            {
                "type": enum("Operation", ["add", "remove"]),
                "contacts": array("Contact IDs"),
                "tags": array("Tags"),
                "removeAllTags": boolean("Remove every tag (remove only)"),
            },
            required=("contacts", "tags"), location="body",
        ),
        Endpoint(
            "bulk_update_contact_business", "Attach or detach many contacts to a business",
            "POST", "/contacts/bulk/business",
            {"contactIds": array("Contact IDs"), "businessId": string("Business ID, null to detach")},
            required=("contactIds",), location="body",
        ),

        # Followers
        Endpoint(
            "add_contact_followers", "Add followers (users) to a contact",
            "POST", "/contacts/{contactId}/followers", {"followers": array("User IDs")},
            required=("followers",),
        ),
        Endpoint(
            "remove_contact_followers", "Remove followers from a contact",
            "DELETE", "/contacts/{contactId}/followers", {"followers": array("User IDs")},
            required=("followers",), send_body=True,
        ),

        # Campaigns & workflows
        Endpoint(
            "add_contact_to_campaign", "Add a contact to a campaign",
            "POST", "/contacts/{contactId}/campaigns/{campaignId}",
        ),
        Endpoint(
            "remove_contact_from_campaign", "Remove a contact from a campaign",
            "DELETE", "/contacts/{contactId}/campaigns/{campaignId}",
        ),
        Endpoint(
            "remove_contact_from_all_campaigns", "Remove a contact from every campaign",
            "DELETE", "/contacts/{contactId}/campaigns/removeAll",
        ),
        Endpoint(
            "add_contact_to_workflow", "Enroll a contact in a workflow",
            "POST", "/contacts/{contactId}/workflow/{workflowId}",
            {"eventStartTime": string("Workflow start time (ISO 8601)")},
        ),
        Endpoint(
            "remove_contact_from_workflow", "Remove a contact from a workflow",
            "DELETE", "/contacts/{contactId}/workflow/{workflowId}",
        ),
    )

    async def _tool_get_contact_appointments(self, args):
        data = await self.client.get(f"/contacts/{quote(str(args['contactId']), safe='')}/appointments")
        events = data.get("events", []) if isinstance(data, dict) else data
        return {"contactId": args["contactId"], "count": len(events), "events": events}
