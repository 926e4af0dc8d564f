"""Survey Tools."""

from .base import CapabilityGroup, Endpoint, number, string


class SurveyGroup(CapabilityGroup):
    name = "surveys"

    TOOL_NAMES = ("ghl_get_surveys", "ghl_get_survey_submissions")

    ENDPOINTS = (
        Endpoint(
            "ghl_get_surveys", "List surveys",
            "GET", "/surveys/",
            {"skip": number("Results to skip"), "limit": number("Maximum results (max 50)"), "type": string("Survey type")},
            location="query",
        ),
        Endpoint(
            "ghl_get_survey_submissions", "List survey submissions",
            "GET", "/surveys/submissions",
            {
                "surveyId": string("Filter by survey"),
                "q": string("Search by contact name, email or phone"),
                "startAt": string("Range start (YYYY-MM-DD)"),
                "endAt": string("Range end (YYYY-MM-DD)"),
                "page": number("Page number"),
                "limit": number("Page size (max 100)"),
            },
            location="query",
        ),
    )
