"""
Static Test Data

Literal records used by the browser scenarios. Read-only for the whole run.
"""
from .models import EventPatch, EventRecord, EventType, EventUpdate, StudentRecord

NEW_STUDENT = StudentRecord(
    name="Alex Thompson",
    grade="Grade 9",
    email="alex.thompson@student.k12.edu",
    phone="(555) 123-4567",
    address="123 Oak Street, Springfield, IL 62701",
    parent_name="Jennifer Thompson",
    parent_email="jennifer.thompson@email.com",
)

STUDENT_WITHOUT_PARENT_EMAIL = StudentRecord(
    name="Maya Patel",
    grade="Grade 11",
    email="maya.patel@student.k12.edu",
    phone="(555) 987-6543",
    address="48 Maple Avenue, Springfield, IL 62704",
    parent_name="Ravi Patel",
)

INVALID_STUDENT = StudentRecord(
    name="Invalid Email Student",
    grade="Grade 10",
    email="not-an-email",
    phone="(555) 000-0000",
    address="1 Nowhere Lane",
    parent_name="Unknown Parent",
)

STUDENT_PAGE_HEADING = "Student Management"
STUDENT_PAGE_SUBTITLE = "Manage student records and information"

LAB_EVENT = EventRecord(
    title="Chemistry Lab Session",
    type=EventType.LAB,
    subject="Chemistry",
    start_time="10:00",
    end_time="11:30",
    location="Science Lab 1",
    attendees=24,
    description="Hands-on titration experiment for Grade 11 chemistry",
)

MATH_CLASS = EventRecord(
    title="Advanced Mathematics",
    type=EventType.CLASS,
    subject="Mathematics",
    start_time="09:00",
    end_time="10:00",
    location="Room A-101",
    attendees=30,
    description="Calculus: limits and continuity",
)

MATH_CLASS_UPDATE = EventUpdate(
    original_title=MATH_CLASS.title,
    patch=EventPatch(
        title="Advanced Mathematics - Review Session",
        location="Room B-205",
    ),
)

# End time before start time; the app must refuse it
INVERTED_TIME_EVENT = EventRecord(
    title="Inverted Time Meeting",
    type=EventType.MEETING,
    subject="Administration",
    start_time="15:00",
    end_time="14:00",
    location="Staff Room",
    attendees=8,
    description="Should be rejected by the application",
)

SCHEDULE_PAGE_HEADING = "Schedule & Calendar"
SCHEDULE_PAGE_SUBTITLE = "Manage classes, events, and important dates"
