"""Association Tools — association definitions and record relations."""

from .base import CapabilityGroup, Endpoint, number, string

_ASSOCIATION_FIELDS = {
    "key": string("Association key"),
    "firstObjectLabel": string("Label on the first object"),
    "firstObjectKey": string("First object key"),
    "secondObjectLabel": string("Label on the second object"),
    "secondObjectKey": string("Second object key"),
}


class AssociationGroup(CapabilityGroup):
    name = "associations"

    TOOL_NAMES = (
        "ghl_get_all_associations", "ghl_create_association", "ghl_get_association_by_id",
        "ghl_update_association", "ghl_delete_association", "ghl_get_association_by_key",
        "ghl_get_association_by_object_key", "ghl_create_relation", "ghl_get_relations_by_record",
        "ghl_delete_relation",
    )

    ENDPOINTS = (
        Endpoint(
            "ghl_get_all_associations", "List all associations of the location",
            "GET", "/associations/",
            {"skip": number("Results to skip", default=0), "limit": number("Maximum results (default 100)", default=100)},
            location="query",
        ),
        Endpoint(
            "ghl_create_association", "Create an association between two object types",
            "POST", "/associations/", _ASSOCIATION_FIELDS,
            required=("key", "firstObjectLabel", "firstObjectKey", "secondObjectLabel", "secondObjectKey"),
            location="body",
        ),
        Endpoint("ghl_get_association_by_id", "Get an association by ID", "GET", "/associations/{associationId}"),
        Endpoint(
            "ghl_update_association", "Update association labels",
            "PUT", "/associations/{associationId}",
            {"firstObjectLabel": string("Label on the first object"), "secondObjectLabel": string("Label on the second object")},
            required=("firstObjectLabel", "secondObjectLabel"),
        ),
        Endpoint("ghl_delete_association", "Delete an association", "DELETE", "/associations/{associationId}"),
        Endpoint(
            "ghl_get_association_by_key", "Get an association by key",
            "GET", "/associations/key/{keyName}", location="query",
        ),
        Endpoint(
            "ghl_get_association_by_object_key", "List associations involving an object key",
            "GET", "/associations/objectKey/{objectKey}", location="query",
        ),
        Endpoint(
            "ghl_create_relation", "Relate two records through an association",
            "POST", "/associations/relations",
            {
                "associationId": string("Association ID"),
                "firstRecordId": string("First record ID"),
                "secondRecordId": string("Second record ID"),
            },
            required=("associationId", "firstRecordId", "secondRecordId"), location="body",
        ),
        Endpoint(
            "ghl_get_relations_by_record", "List relations of a record",
            "GET", "/associations/relations/{recordId}",
            {
                "skip": number("Results to skip", default=0),
                "limit": number("Maximum results (default 20)", default=20),
                "associationIds": string("Comma-separated association IDs"),
            },
            location="query",
        ),
        Endpoint(
            "ghl_delete_relation", "Delete a relation between two records",
            "DELETE", "/associations/relations/{relationId}", location="query",
        ),
    )
