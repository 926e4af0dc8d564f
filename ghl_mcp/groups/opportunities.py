"""Opportunity Tools — pipelines and deals."""

from .base import CapabilityGroup, Endpoint, array, enum, number, string

_STATUS = ["open", "won", "lost", "abandoned"]

_OPPORTUNITY_FIELDS = {
    "name": string("Opportunity name"),
    "pipelineId": string("Pipeline ID"),
    "pipelineStageId": string("Pipeline stage ID"),
    "contactId": string("Contact ID"),
    "status": enum("Status", _STATUS),
    "monetaryValue": number("Deal value"),
    "assignedTo": string("Assigned user ID"),
}


class OpportunityGroup(CapabilityGroup):
    name = "opportunities"

    TOOL_NAMES = (
        "search_opportunities", "get_pipelines", "get_opportunity", "create_opportunity",
        "update_opportunity_status", "delete_opportunity", "update_opportunity",
        "upsert_opportunity", "add_opportunity_followers", "remove_opportunity_followers",
    )

    ENDPOINTS = (
        Endpoint(
            "search_opportunities", "Search opportunities by pipeline, stage, status or contact",
            "GET", "/opportunities/search",
            {
                "q": string("Free-text search"),
                "pipeline_id": string("Pipeline ID"),
                "pipeline_stage_id": string("Stage ID"),
                "contact_id": string("Contact ID"),
                "status": enum("Status", _STATUS + ["all"]),
                "assigned_to": string("Assigned user ID"),
                "limit": number("Maximum results (default 20)", default=20),
            },
            query=("location_id",),
        ),
        Endpoint(
            "get_pipelines", "List sales pipelines and their stages",
            "GET", "/opportunities/pipelines", location="query",
        ),
        Endpoint("get_opportunity", "Get an opportunity by ID", "GET", "/opportunities/{opportunityId}"),
        Endpoint(
            "create_opportunity", "Create an opportunity",
            "POST", "/opportunities/", _OPPORTUNITY_FIELDS,
            required=("name", "pipelineId", "contactId"), location="body",
        ),
        Endpoint(
            "update_opportunity_status", "Change the status of an opportunity",
            "PUT", "/opportunities/{opportunityId}/status",
            {"status": enum("New status", _STATUS), "lostReasonId": string("Lost reason ID")},
            required=("status",),
        ),
        Endpoint("delete_opportunity", "Delete an opportunity", "DELETE", "/opportunities/{opportunityId}"),
        Endpoint(
            "update_opportunity", "Update an opportunity",
            "PUT", "/opportunities/{opportunityId}", _OPPORTUNITY_FIELDS,
        ),
        Endpoint(
            "upsert_opportunity", "Create or update an opportunity matched by contact and pipeline",
            "POST", "/opportunities/upsert", _OPPORTUNITY_FIELDS,
            required=("pipelineId", "contactId"), location="body",
        ),
        Endpoint(
            "add_opportunity_followers", "Add followers to an opportunity",
            "POST", "/opportunities/{opportunityId}/followers", {"followers": array("User IDs")},
            required=("followers",),
        ),
        Endpoint(
            "remove_opportunity_followers", "Remove followers from an opportunity",
            "DELETE", "/opportunities/{opportunityId}/followers", {"followers": array("User IDs")},
            required=("followers",), send_body=True,
        ),
    )

    async def _tool_search_opportunities(self, args):
        args.setdefault("location_id", self.client.location_id)
        return await self.call(self._endpoints["search_opportunities"], args)
