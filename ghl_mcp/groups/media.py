"""Media Library Tools."""

from .base import CapabilityGroup, Endpoint, boolean, enum, number, string


class MediaGroup(CapabilityGroup):
    name = "media"

    TOOL_NAMES = ("get_media_files", "upload_media_file", "delete_media_file")

    ENDPOINTS = (
        Endpoint(
            "get_media_files", "List files and folders in the media library",
            "GET", "/medias/files",
            {
                "sortBy": string("Sort field (default createdAt)", default="createdAt"),
                "sortOrder": enum("Sort order", ["asc", "desc"]),
                "type": enum("Entry type", ["file", "folder"]),
                "query": string("Search query"),
                "limit": number("Maximum results"),
                "parentId": string("Parent folder ID"),
            },
            location="alt",
        ),
        Endpoint(
            "upload_media_file", "Upload a file (or register a hosted file URL) to the media library",
            "POST", "/medias/upload-file",
            {
                "hosted": boolean("True when fileUrl points to an already-hosted file"),
                "fileUrl": string("Hosted file URL"),
                "name": string("File name"),
                "parentId": string("Parent folder ID"),
            },
            location="body",
        ),
        Endpoint("delete_media_file", "Delete a media file or folder", "DELETE", "/medias/{id}", location="alt"),
    )
