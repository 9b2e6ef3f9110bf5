"""Shared constants for monthcal."""

# Storage slot holding the serialized event list
STORAGE_KEY = "calendarEvents"

# Event defaults
DEFAULT_CATEGORY = "personal"
DEFAULT_COLOR = "#3b82f6"

# Seconds a notification stays visible
NOTIFICATION_DELAY = 3.0

# Date/time string formats
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

# User-facing notification messages
MSG_EVENT_ADDED = "Event added"
MSG_EVENT_UPDATED = "Event updated"
MSG_EVENT_DELETED = "Event deleted"
MSG_LOAD_FAILED = "Failed to load data"
MSG_SAVE_FAILED = "Failed to save data"
MSG_TITLE_REQUIRED = "Title is required"
