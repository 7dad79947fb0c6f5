"""
Page Object Models for the Harmony Hub E2E Suite

This package provides page objects that encapsulate UI interactions
and provide a clean API for test code.
"""

from .base_page import BasePage
from .schedule_page import EventCard, SchedulePage
from .student_page import StudentPage

__all__ = [
    "BasePage",
    "EventCard",
    "SchedulePage",
    "StudentPage",
]
