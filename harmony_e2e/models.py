"""
Test Data Models

Plain records that parameterize the browser scenarios. The application owns
the real students and events; these only describe what to submit and what
to expect back.
"""
import re
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, Optional

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class EventType(str, Enum):
    """Event categories offered by the schedule dialog."""

    CLASS = "Class"
    LAB = "Lab"
    MEETING = "Meeting"
    EVENT = "Event"
    EXAM = "Exam"
    ACTIVITY = "Activity"


def _require_text(field_name: str, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f"{field_name} must be a non-empty string")


def _require_time(field_name: str, value: str) -> None:
    if not TIME_PATTERN.match(value):
        raise ValueError(f"{field_name} must be HH:MM (24-hour), got {value!r}")


@dataclass(frozen=True)
class StudentRecord:
    """A student to create through the Add Student dialog."""

    name: str
    grade: str
    email: str
    phone: str
    address: str
    parent_name: str
    parent_email: Optional[str] = None
    enrolled_date: Optional[str] = None  # Set by the app; never filled

    def __post_init__(self):
        _require_text("name", self.name)
        _require_text("grade", self.grade)
        if self.parent_email is not None:
            _require_text("parent_email", self.parent_email)


@dataclass(frozen=True)
class EventRecord:
    """A calendar event to create through the Add Event dialog."""

    title: str
    type: EventType
    subject: str
    start_time: str
    end_time: str
    location: str
    attendees: int
    description: str

    def __post_init__(self):
        _require_text("title", self.title)
        _require_time("start_time", self.start_time)
        _require_time("end_time", self.end_time)
        if isinstance(self.attendees, bool) or self.attendees < 0:
            raise ValueError(f"attendees must be a non-negative integer, got {self.attendees!r}")
        # Accept plain strings from literals
        object.__setattr__(self, "type", EventType(self.type))

    def merged(self, patch: "EventPatch") -> "EventRecord":
        """Record expected after applying an edit."""
        return replace(self, **patch.present_fields())


@dataclass(frozen=True)
class EventPatch:
    """Partial event; None means 'leave unchanged'."""

    title: Optional[str] = None
    type: Optional[EventType] = None
    subject: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    attendees: Optional[int] = None
    description: Optional[str] = None

    def __post_init__(self):
        if self.title is not None:
            _require_text("title", self.title)
        for name in ("start_time", "end_time"):
            value = getattr(self, name)
            if value is not None:
                _require_time(name, value)
        if self.attendees is not None and (isinstance(self.attendees, bool) or self.attendees < 0):
            raise ValueError(f"attendees must be a non-negative integer, got {self.attendees!r}")
        if self.type is not None:
            object.__setattr__(self, "type", EventType(self.type))

    def present_fields(self) -> Dict[str, Any]:
        """Fields supplied by the caller, in dialog order."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        return {name: value for name, value in values.items() if value is not None}

    def is_empty(self) -> bool:
        return not self.present_fields()


@dataclass(frozen=True)
class EventUpdate:
    """An edit addressed by the event's current title."""

    original_title: str
    patch: EventPatch

    def __post_init__(self):
        _require_text("original_title", self.original_title)
