"""Calendar Tools — calendars, groups, events, appointments, free slots, block slots."""

from .base import CapabilityGroup, Endpoint, boolean, enum, number, string

_CALENDAR_FIELDS = {
    "name": string("Calendar name"),
    "description": string("Calendar description"),
    "calendarType": enum("Calendar type", ["round_robin", "event", "class_booking", "collective", "service_booking", "personal"]),
    "groupId": string("Calendar group ID"),
    "slotDuration": number("Slot length in minutes"),
    "slotInterval": number("Slot interval in minutes"),
    "isActive": boolean("Whether the calendar is active"),
}

_APPOINTMENT_FIELDS = {
    "calendarId": string("Calendar ID"),
    "contactId": string("Contact ID"),
    "startTime": string("Start time (ISO 8601)"),
    "endTime": string("End time (ISO 8601)"),
    "title": string("Appointment title"),
    "appointmentStatus": enum("Status", ["new", "confirmed", "cancelled", "showed", "noshow", "invalid"]),
    "assignedUserId": string("Assigned user ID"),
    "address": string("Meeting location or URL"),
    "ignoreDateRange": boolean("Skip the booking window check"),
    "toNotify": boolean("Send notifications"),
}

_BLOCK_SLOT_FIELDS = {
    "calendarId": string("Calendar ID"),
    "startTime": string("Start time (ISO 8601)"),
    "endTime": string("End time (ISO 8601)"),
    "title": string("Block title"),
    "assignedUserId": string("User ID"),
}


class CalendarGroup(CapabilityGroup):
    name = "calendar"

    TOOL_NAMES = (
        "get_calendar_groups", "get_calendars", "create_calendar", "get_calendar", "update_calendar",
        "delete_calendar", "get_calendar_events", "get_free_slots", "create_appointment",
        "get_appointment", "update_appointment", "delete_appointment", "create_block_slot", "update_block_slot",
    )

    ENDPOINTS = (
        Endpoint("get_calendar_groups", "List calendar groups", "GET", "/calendars/groups", location="query"),
        Endpoint(
            "get_calendars", "List calendars",
            "GET", "/calendars/",
            {"groupId": string("Filter by group"), "showDrafted": boolean("Include drafts")},
            location="query",
        ),
        Endpoint(
            "create_calendar", "Create a calendar",
            "POST", "/calendars/", _CALENDAR_FIELDS, required=("name", "calendarType"), location="body",
        ),
        Endpoint("get_calendar", "Get a calendar by ID", "GET", "/calendars/{calendarId}"),
        Endpoint("update_calendar", "Update a calendar", "PUT", "/calendars/{calendarId}", _CALENDAR_FIELDS),
        Endpoint("delete_calendar", "Delete a calendar", "DELETE", "/calendars/{calendarId}"),
        Endpoint(
            "get_calendar_events", "List events/appointments in a time range",
            "GET", "/calendars/events",
            {
                "startTime": string("Range start (epoch millis or ISO 8601)"),
                "endTime": string("Range end (epoch millis or ISO 8601)"),
                "calendarId": string("Filter by calendar"),
                "userId": string("Filter by user"),
                "groupId": string("Filter by group"),
            },
            required=("startTime", "endTime"), location="query",
        ),
        Endpoint(
            "get_free_slots", "Get available booking slots for a calendar",
            "GET", "/calendars/{calendarId}/free-slots",
            {
                "startDate": string("Range start (epoch millis)"),
                "endDate": string("Range end (epoch millis)"),
                "timezone": string("IANA timezone"),
                "userId": string("Restrict to one user"),
            },
            required=("startDate", "endDate"),
        ),
        Endpoint(
            "create_appointment", "Book an appointment",
            "POST", "/calendars/events/appointments", _APPOINTMENT_FIELDS,
            required=("calendarId", "contactId", "startTime"), location="body",
        ),
        Endpoint("get_appointment", "Get an appointment by ID", "GET", "/calendars/events/appointments/{appointmentId}"),
        Endpoint(
            "update_appointment", "Update an appointment",
            "PUT", "/calendars/events/appointments/{appointmentId}", _APPOINTMENT_FIELDS,
        ),
        Endpoint("delete_appointment", "Delete an appointment", "DELETE", "/calendars/events/{appointmentId}"),
        Endpoint(
            "create_block_slot", "Block off time on a calendar",
            "POST", "/calendars/events/block-slots", _BLOCK_SLOT_FIELDS,
            required=("startTime", "endTime"), location="body",
        ),
        Endpoint(
            "update_block_slot", "Update a blocked time slot",
            "PUT", "/calendars/events/block-slots/{blockSlotId}", _BLOCK_SLOT_FIELDS, location="body",
        ),
    )
