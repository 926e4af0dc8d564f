"""Custom Object Tools — object schemas and records."""

from .base import CapabilityGroup, Endpoint, array, number, obj, string

_SCHEMA_FIELDS = {
    "labels": obj("Singular and plural labels ({singular, plural})"),
    "key": string("Object key, e.g. custom_objects.pet"),
    "description": string("Object description"),
    "primaryDisplayPropertyDetails": obj("Primary display property ({key, name, dataType})"),
    "searchableProperties": array("Searchable property keys"),
}

_RECORD_FIELDS = {
    "properties": obj("Record property values keyed by field key"),
    "owner": array("Owner user IDs"),
    "followers": array("Follower user IDs"),
}


class ObjectGroup(CapabilityGroup):
    name = "objects"

    TOOL_NAMES = (
        "get_all_objects", "create_object_schema", "get_object_schema", "update_object_schema",
        "create_object_record", "get_object_record", "update_object_record", "delete_object_record",
        "search_object_records",
    )

    ENDPOINTS = (
        Endpoint("get_all_objects", "List all standard and custom objects", "GET", "/objects/", location="query"),
        Endpoint(
            "create_object_schema", "Create a custom object schema",
            "POST", "/objects/", _SCHEMA_FIELDS,
            required=("labels", "key", "primaryDisplayPropertyDetails"), location="body",
        ),
        Endpoint(
            "get_object_schema", "Get an object schema and its fields by key",
            "GET", "/objects/{key}", {"fetchProperties": string("'true' to include field definitions")},
            location="query",
        ),
        Endpoint(
            "update_object_schema", "Update a custom object schema",
            "PUT", "/objects/{key}",
            {
                "labels": obj("Singular and plural labels"),
                "description": string("Object description"),
                "searchableProperties": array("Searchable property keys"),
            },
            location="body",
        ),
        Endpoint(
            "create_object_record", "Create a record of a custom object",
            "POST", "/objects/{schemaKey}/records", _RECORD_FIELDS,
            required=("properties",), location="body",
        ),
        Endpoint("get_object_record", "Get a custom object record", "GET", "/objects/{schemaKey}/records/{recordId}"),
        Endpoint(
            "update_object_record", "Update a custom object record",
            "PUT", "/objects/{schemaKey}/records/{recordId}", _RECORD_FIELDS, location="query",
        ),
        Endpoint("delete_object_record", "Delete a custom object record", "DELETE", "/objects/{schemaKey}/records/{recordId}"),
        Endpoint(
            "search_object_records", "Search records of a custom object",
            "POST", "/objects/{schemaKey}/records/search",
            {
                "query": string("Search query over searchable properties"),
                "page": number("Page number (default 1)", default=1),
                "pageLimit": number("Page size (default 10)", default=10),
                "searchAfter": array("Cursor from the previous page"),
            },
            location="body",
        ),
    )
