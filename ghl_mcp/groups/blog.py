"""Blog Tools — posts, sites, authors, categories, URL slugs."""

from .base import CapabilityGroup, Endpoint, array, enum, number, string

_POST_FIELDS = {
    "title": string("Post title"),
    "blogId": string("Blog site ID"),
    "rawHTML": string("Post body as HTML"),
    "description": string("Meta description"),
    "imageUrl": string("Featured image URL"),
    "imageAltText": string("Featured image alt text"),
    "author": string("Author ID"),
    "categories": array("Category IDs"),
    "tags": array("Tags"),
    "urlSlug": string("URL slug"),
    "status": enum("Publication status", ["DRAFT", "PUBLISHED", "SCHEDULED", "ARCHIVED"]),
    "publishedAt": string("Publication date (ISO 8601)"),
}

_PAGING = {
    "limit": number("Maximum results (default 10)", default=10),
    "offset": number("Results to skip", default=0),
}


class BlogGroup(CapabilityGroup):
    name = "blog"

    TOOL_NAMES = (
        "create_blog_post", "update_blog_post", "get_blog_posts", "get_blog_sites",
        "get_blog_authors", "get_blog_categories", "check_url_slug",
    )

    ENDPOINTS = (
        Endpoint(
            "create_blog_post", "Create a blog post",
            "POST", "/blogs/posts", _POST_FIELDS,
            required=("title", "blogId", "rawHTML"), location="body",
        ),
        Endpoint(
            "update_blog_post", "Update a blog post",
            "PUT", "/blogs/posts/{postId}", _POST_FIELDS, location="body",
        ),
        Endpoint(
            "get_blog_posts", "List posts of a blog site",
            "GET", "/blogs/posts/all",
            {"blogId": string("Blog site ID"), "searchTerm": string("Search term"), "status": string("Status filter"), **_PAGING},
            required=("blogId",), location="query",
        ),
        Endpoint(
            "get_blog_sites", "List blog sites",
            "GET", "/blogs/site/all", {"searchTerm": string("Search term"), **_PAGING},
            location="query",
        ),
        Endpoint("get_blog_authors", "List blog authors", "GET", "/blogs/authors", dict(_PAGING), location="query"),
        Endpoint("get_blog_categories", "List blog categories", "GET", "/blogs/categories", dict(_PAGING), location="query"),
        Endpoint(
            "check_url_slug", "Check whether a blog URL slug is already taken",
            "GET", "/blogs/posts/url-slug-exists",
            {"urlSlug": string("Slug to check"), "postId": string("Post to exclude from the check")},
            required=("urlSlug",), location="query",
        ),
    )
