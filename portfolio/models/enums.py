"""Enums for model fields."""

from enum import StrEnum


class HireRequestStatus(StrEnum):
    """Lifecycle of a hire request.

    A request starts as ``inprocess`` while the client fills in the form in
    several steps; the first client update moves it to ``unread``.
    """

    INPROCESS = "inprocess"
    UNREAD = "unread"
    READ = "read"
    ARCHIVED = "archived"


class MessageStatus(StrEnum):
    """Read state of a contact-form message."""

    UNREAD = "unread"
    READ = "read"
    ARCHIVED = "archived"
