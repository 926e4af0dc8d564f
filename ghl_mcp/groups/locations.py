"""
Location Tools — sub-accounts, tags, tasks, custom fields/values, templates, timezones.

24 tools over /locations/*.
"""

from .base import CapabilityGroup, Endpoint, array, enum, number, obj, string

_LOCATION_FIELDS = {
    "name": string("Location (sub-account) name"),
    "companyId": string("Agency company ID"),
    "phone": string("Phone number"),
    "email": string("Business email"),
    "address": string("Street address"),
    "city": string("City"),
    "state": string("State"),
    "country": string("Country code"),
    "postalCode": string("Postal code"),
    "website": string("Website URL"),
    "timezone": string("IANA timezone"),
    "settings": obj("Location settings"),
}

_CUSTOM_FIELD_FIELDS = {
    "name": string("Field name"),
    "dataType": enum("Field type", [
        "TEXT", "LARGE_TEXT", "NUMERICAL", "PHONE", "MONETORY", "CHECKBOX",
        "SINGLE_OPTIONS", "MULTIPLE_OPTIONS", "DATE", "TEXTBOX_LIST", "FILE_UPLOAD",
    ]),
    "placeholder": string("Placeholder text"),
    "model": enum("Owning model", ["contact", "opportunity"]),
    "options": array("Options for option-type fields"),
    "position": number("Display position"),
}

_CUSTOM_VALUE_FIELDS = {
    "name": string("Custom value name"),
    "value": string("Custom value"),
}


class LocationGroup(CapabilityGroup):
    name = "locations"

    TOOL_NAMES = (
        "search_locations", "get_location", "create_location", "update_location", "delete_location",
        "get_location_tags", "create_location_tag", "get_location_tag", "update_location_tag", "delete_location_tag",
        "search_location_tasks",
        "get_location_custom_fields", "create_location_custom_field", "get_location_custom_field",
        "update_location_custom_field", "delete_location_custom_field",
        "get_location_custom_values", "create_location_custom_value", "get_location_custom_value",
        "update_location_custom_value", "delete_location_custom_value",
        "get_location_templates", "delete_location_template",
        "get_timezones",
    )

    ENDPOINTS = (
        Endpoint(
            "search_locations", "Search locations (sub-accounts) of an agency",
            "GET", "/locations/search",
            {
                "companyId": string("Agency company ID"),
                "email": string("Filter by email"),
                "limit": number("Maximum results (default 10)", default=10),
                "skip": number("Results to skip", default=0),
                "order": enum("Sort order", ["asc", "desc"]),
            },
        ),
        Endpoint("get_location", "Get a location by ID", "GET", "/locations/{locationId}"),
        Endpoint(
            "create_location", "Create a location (agency plan required)",
            "POST", "/locations/", _LOCATION_FIELDS, required=("name", "companyId"),
        ),
        Endpoint("update_location", "Update a location", "PUT", "/locations/{locationId}", _LOCATION_FIELDS),
        Endpoint(
            "delete_location", "Delete a location",
            "DELETE", "/locations/{locationId}", {"deleteTwilioAccount": string("'true' to also delete the Twilio account")},
            required=("locationId",),
        ),

        # Tags
        Endpoint("get_location_tags", "List tags of a location", "GET", "/locations/{locationId}/tags"),
        Endpoint(
            "create_location_tag", "Create a location tag",
            "POST", "/locations/{locationId}/tags", {"name": string("Tag name")}, required=("name",),
        ),
        Endpoint("get_location_tag", "Get a location tag", "GET", "/locations/{locationId}/tags/{tagId}"),
        Endpoint(
            "update_location_tag", "Rename a location tag",
            "PUT", "/locations/{locationId}/tags/{tagId}", {"name": string("Tag name")}, required=("name",),
        ),
        Endpoint("delete_location_tag", "Delete a location tag", "DELETE", "/locations/{locationId}/tags/{tagId}"),

        # Tasks
        Endpoint(
            "search_location_tasks", "Search tasks across a location",
            "POST", "/locations/{locationId}/tasks/search",
            {
                "contactId": array("Filter by contact IDs"),
                "completed": string("'true'/'false' completion filter"),
                "assignedTo": array("Filter by assigned users"),
                "query": string("Free-text search"),
                "limit": number("Maximum results (default 25)", default=25),
                "skip": number("Results to skip", default=0),
            },
        ),

        # Custom fields
        Endpoint(
            "get_location_custom_fields", "List custom fields of a location",
            "GET", "/locations/{locationId}/customFields", {"model": enum("Owning model", ["contact", "opportunity", "all"])},
        ),
        Endpoint(
            "create_location_custom_field", "Create a location custom field",
            "POST", "/locations/{locationId}/customFields", _CUSTOM_FIELD_FIELDS, required=("name", "dataType"),
        ),
        Endpoint(
            "get_location_custom_field", "Get a location custom field",
            "GET", "/locations/{locationId}/customFields/{customFieldId}",
        ),
        Endpoint(
            "update_location_custom_field", "Update a location custom field",
            "PUT", "/locations/{locationId}/customFields/{customFieldId}", _CUSTOM_FIELD_FIELDS, required=("name",),
        ),
        Endpoint(
            "delete_location_custom_field", "Delete a location custom field",
            "DELETE", "/locations/{locationId}/customFields/{customFieldId}",
        ),

        # Custom values
        Endpoint("get_location_custom_values", "List custom values of a location", "GET", "/locations/{locationId}/customValues"),
        Endpoint(
            "create_location_custom_value", "Create a location custom value",
            "POST", "/locations/{locationId}/customValues", _CUSTOM_VALUE_FIELDS, required=("name", "value"),
        ),
        Endpoint(
            "get_location_custom_value", "Get a location custom value",
            "GET", "/locations/{locationId}/customValues/{customValueId}",
        ),
        Endpoint(
            "update_location_custom_value", "Update a location custom value",
            "PUT", "/locations/{locationId}/customValues/{customValueId}", _CUSTOM_VALUE_FIELDS, required=("name", "value"),
        ),
        Endpoint(
            "delete_location_custom_value", "Delete a location custom value",
            "DELETE", "/locations/{locationId}/customValues/{customValueId}",
        ),

        # Templates
        Endpoint(
            "get_location_templates", "List SMS/email templates of a location",
            "GET", "/locations/{locationId}/templates",
            {
                "originId": string("Origin (agency) ID"),
                "deleted": string("'true' to include deleted templates"),
                "type": enum("Template type", ["sms", "email", "whatsapp"]),
                "limit": number("Maximum results (default 25)", default=25),
                "skip": number("Results to skip", default=0),
            },
            required=("originId",),
        ),
        Endpoint(
            "delete_location_template", "Delete a location template",
            "DELETE", "/locations/{locationId}/templates/{templateId}",
        ),

        Endpoint("get_timezones", "List timezones available to a location", "GET", "/locations/{locationId}/timezones"),
    )
