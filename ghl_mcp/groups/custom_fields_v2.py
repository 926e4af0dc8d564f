"""Custom Field V2 Tools — custom fields and folders for custom objects."""

from .base import CapabilityGroup, Endpoint, array, boolean, enum, string

_FIELD_FIELDS = {
    "name": string("Field name"),
    "description": string("Field description"),
    "placeholder": string("Placeholder text"),
    "dataType": enum("Field type", [
        "TEXT", "LARGE_TEXT", "NUMERICAL", "PHONE", "MONETORY", "CHECKBOX",
        "SINGLE_OPTIONS", "MULTIPLE_OPTIONS", "DATE", "TEXTBOX_LIST", "FILE_UPLOAD", "RADIO", "EMAIL",
    ]),
    "fieldKey": string("Field key, e.g. custom_object.pet.name"),
    "objectKey": string("Owning object key"),
    "parentId": string("Folder ID"),
    "options": array("Options ({key, label})", items="object"),
    "showInForms": boolean("Show in forms"),
}


class CustomFieldV2Group(CapabilityGroup):
    name = "custom_fields_v2"

    TOOL_NAMES = (
        "ghl_get_custom_field_by_id", "ghl_create_custom_field", "ghl_update_custom_field",
        "ghl_delete_custom_field", "ghl_get_custom_fields_by_object_key", "ghl_create_custom_field_folder",
        "ghl_update_custom_field_folder", "ghl_delete_custom_field_folder",
    )

    ENDPOINTS = (
        Endpoint("ghl_get_custom_field_by_id", "Get a custom field or folder by ID", "GET", "/custom-fields/{id}"),
        Endpoint(
            "ghl_create_custom_field", "Create a custom field on a custom object",
            "POST", "/custom-fields/", _FIELD_FIELDS,
            required=("dataType", "fieldKey", "objectKey", "parentId"), location="body",
        ),
        Endpoint(
            "ghl_update_custom_field", "Update a custom field",
            "PUT", "/custom-fields/{id}", _FIELD_FIELDS, location="body",
        ),
        Endpoint("ghl_delete_custom_field", "Delete a custom field", "DELETE", "/custom-fields/{id}"),
        Endpoint(
            "ghl_get_custom_fields_by_object_key", "List custom fields and folders of an object",
            "GET", "/custom-fields/object-key/{objectKey}", location="query",
        ),
        Endpoint(
            "ghl_create_custom_field_folder", "Create a custom field folder",
            "POST", "/custom-fields/folder",
            {"objectKey": string("Owning object key"), "name": string("Folder name")},
            required=("objectKey", "name"), location="body",
        ),
        Endpoint(
            "ghl_update_custom_field_folder", "Rename a custom field folder",
            "PUT", "/custom-fields/folder/{id}", {"name": string("Folder name")},
            required=("name",), location="body",
        ),
        Endpoint(
            "ghl_delete_custom_field_folder", "Delete a custom field folder",
            "DELETE", "/custom-fields/folder/{id}", location="query",
        ),
    )
