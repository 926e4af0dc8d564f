"""
Social Media Tools — Social Planner posts, accounts, CSV imports, categories, tags, OAuth.

All paths are scoped under /social-media-posting/{locationId}.
"""

from .base import CapabilityGroup, Endpoint, array, boolean, enum, number, obj, string

_PLATFORMS = ["google", "facebook", "instagram", "linkedin", "twitter", "tiktok", "tiktok-business"]

_POST_FIELDS = {
    "accountIds": array("Social account IDs to publish to"),
    "summary": string("Post text"),
    "media": array("Media objects ({url, type})", items="object"),
    "status": enum("Post status", ["draft", "scheduled", "published", "failed", "in_review", "deleted"]),
    "scheduleDate": string("Publish time (ISO 8601)"),
    "type": enum("Post type", ["post", "story", "reel"]),
    "tags": array("Tag IDs"),
    "categoryId": string("Category ID"),
    "userId": string("Author user ID"),
    "followUpComment": string("Comment posted after publishing"),
}

_PAGING = {
    "limit": number("Maximum results (default 10)", default=10),
    "skip": number("Results to skip", default=0),
}

_BASE = "/social-media-posting/{locationId}"


class SocialMediaGroup(CapabilityGroup):
    name = "social_media"

    TOOL_NAMES = (
        "search_social_posts", "create_social_post", "get_social_post", "update_social_post",
        "delete_social_post", "bulk_delete_social_posts",
        "get_social_accounts", "delete_social_account",
        "upload_social_csv", "get_csv_upload_status", "set_csv_accounts",
        "get_social_categories", "get_social_category", "get_social_tags", "get_social_tags_by_ids",
        "start_social_oauth", "get_platform_accounts",
    )

    ENDPOINTS = (
        Endpoint(
            "search_social_posts", "Search Social Planner posts",
            "POST", f"{_BASE}/posts/list",
            {
                "type": enum("Post state", ["recent", "all", "scheduled", "draft", "failed", "in_review", "published", "in_progress", "deleted"]),
                "accounts": string("Comma-separated account IDs"),
                "fromDate": string("Range start (ISO 8601)"),
                "toDate": string("Range end (ISO 8601)"),
                "includeUsers": boolean("Include user details"),
                **_PAGING,
            },
            required=("fromDate", "toDate"),
        ),
        Endpoint(
            "create_social_post", "Create or schedule a social media post",
            "POST", f"{_BASE}/posts", _POST_FIELDS, required=("accountIds", "summary", "type"),
        ),
        Endpoint("get_social_post", "Get a social post", "GET", f"{_BASE}/posts/{{postId}}"),
        Endpoint("update_social_post", "Update a social post", "PUT", f"{_BASE}/posts/{{postId}}", _POST_FIELDS),
        Endpoint("delete_social_post", "Delete a social post", "DELETE", f"{_BASE}/posts/{{postId}}"),
        Endpoint(
            "bulk_delete_social_posts", "Delete up to 50 social posts",
            "POST", f"{_BASE}/posts/bulk-delete", {"postIds": array("Post IDs (max 50)")},
            required=("postIds",),
        ),

        # Accounts
        Endpoint("get_social_accounts", "List connected social accounts and groups", "GET", f"{_BASE}/accounts"),
        Endpoint(
            "delete_social_account", "Disconnect a social account",
            "DELETE", f"{_BASE}/accounts/{{accountId}}",
            {"companyId": string("Company ID"), "userId": string("User ID")},
        ),

        # CSV import
        Endpoint(
            "upload_social_csv", "Upload a CSV of posts for bulk scheduling",
            "POST", f"{_BASE}/csv", {"file": string("CSV file URL or content")}, required=("file",),
        ),
        Endpoint(
            "get_csv_upload_status", "Get CSV upload progress",
            "GET", f"{_BASE}/csv", {**_PAGING, "userId": string("User ID")},
        ),
        Endpoint(
            "set_csv_accounts", "Assign accounts to an uploaded CSV",
            "POST", f"{_BASE}/set-accounts",
            {
                "accountIds": array("Account IDs"),
                "filePath": string("Uploaded CSV path"),
                "rowsCount": number("Rows in the CSV"),
                "fileName": string("CSV file name"),
                "approver": string("Approver user ID"),
                "userId": string("User ID"),
            },
            required=("accountIds", "filePath", "rowsCount", "fileName"),
        ),

        # Categories & tags
        Endpoint(
            "get_social_categories", "List Social Planner categories",
            "GET", f"{_BASE}/categories", {"searchText": string("Search text"), **_PAGING},
        ),
        Endpoint("get_social_category", "Get a Social Planner category", "GET", f"{_BASE}/categories/{{categoryId}}"),
        Endpoint(
            "get_social_tags", "List Social Planner tags",
            "GET", f"{_BASE}/tags", {"searchText": string("Search text"), **_PAGING},
        ),
        Endpoint(
            "get_social_tags_by_ids", "Get Social Planner tags by ID",
            "POST", f"{_BASE}/tags/details", {"tagIds": array("Tag IDs")}, required=("tagIds",),
        ),

        # OAuth
        Endpoint(
            "start_social_oauth", "Start the OAuth flow to connect a social platform",
            "GET", "/social-media-posting/oauth/{platform}/start",
            {
                "platform": enum("Platform", _PLATFORMS),
                "userId": string("User ID"),
                "page": string("Page to return to"),
                "reconnect": boolean("Reconnect an existing account"),
            },
            required=("userId",), location="query",
        ),
        Endpoint(
            "get_platform_accounts", "List accounts available on a platform after OAuth",
            "GET", "/social-media-posting/oauth/{locationId}/{platform}/accounts/{accountId}",
            {"platform": enum("Platform", _PLATFORMS), "metadata": obj("Platform-specific metadata")},
        ),
    )
