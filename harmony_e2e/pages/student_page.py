"""
Student Page Object

Encapsulates the student management screen: listing, lookup and the
Add Student dialog.
"""
import logging
from typing import List, Optional

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..config import E2EConfig
from ..data import STUDENT_PAGE_HEADING, STUDENT_PAGE_SUBTITLE
from ..errors import AssertionFailure
from ..models import StudentRecord
from .base_page import BasePage, exact_text

logger = logging.getLogger(__name__)


class StudentPage(BasePage):
    """Page object for student management."""

    PATH = "/students"
    HEADING = STUDENT_PAGE_HEADING
    SUBTITLE = STUDENT_PAGE_SUBTITLE

    # Selectors
    STUDENT_CARD = '[data-testid="student-card"], .student-card'
    STUDENT_NAME = '[data-testid="student-name"], .student-name'
    SEARCH_INPUT = 'input[placeholder*="Search" i]'

    ADD_BUTTON_NAME = "Add Student"

    # Dialog field labels, in form order
    FIELD_LABELS = {
        "name": "Full Name",
        "email": "Email",
        "phone": "Phone",
        "address": "Address",
        "parent_name": "Parent Name",
    }
    GRADE_LABEL = "Grade"
    PARENT_EMAIL_LABEL = "Parent Email"

    def __init__(self, page: Page, config: Optional[E2EConfig] = None):
        super().__init__(page, config)

    def navigate(self) -> "StudentPage":
        """Navigate to the students page."""
        super().navigate()
        return self

    # =========================================================================
    # Listing
    # =========================================================================

    @property
    def cards(self) -> Locator:
        return self.locator(self.STUDENT_CARD)

    def get_student_count(self) -> int:
        """Number of student cards rendered right now."""
        return self.cards.count()

    def get_student_names(self) -> List[str]:
        return self.texts(self.cards.locator(self.STUDENT_NAME))

    def _name_locator(self, name: str) -> Locator:
        return self.cards.locator(self.STUDENT_NAME).filter(has_text=exact_text(name))

    def search_students(self, query: str) -> int:
        """Type into the search box and return the filtered count."""
        search = self.single(self.locator(self.SEARCH_INPUT), "student search box")
        search.fill(query)
        return self.get_student_count()

    # =========================================================================
    # Create Student
    # =========================================================================

    def open_add_dialog(self) -> Locator:
        trigger = self.get_by_role("button", name=self.ADD_BUTTON_NAME, exact=True)
        return self.open_dialog(trigger.first, "Add Student")

    def fill_student_form(self, dialog: Locator, record: StudentRecord) -> None:
        for attr, label in self.FIELD_LABELS.items():
            self.fill_field(dialog, label, getattr(record, attr))
        self.choose(dialog, self.GRADE_LABEL, record.grade)
        if record.parent_email is not None:
            self.fill_field(dialog, self.PARENT_EMAIL_LABEL, record.parent_email)

    def add_student(self, record: StudentRecord) -> None:
        """Create a student through the dialog and wait for it to close.

        Raises ValidationRejected if the app keeps the dialog open with an
        error.
        """
        logger.info("Adding student '%s' (%s)", record.name, record.grade)
        dialog = self.open_add_dialog()
        self.fill_student_form(dialog, record)
        dialog.get_by_role("button", name=self.ADD_BUTTON_NAME, exact=True).click()
        self.wait_for_dialog_closed("Add Student")

    # =========================================================================
    # Assertions
    # =========================================================================

    def verify_student_present(self, name: str) -> None:
        """Assert a card's name field equals `name` exactly."""
        try:
            self._name_locator(name).first.wait_for(
                state="visible", timeout=self.config.default_timeout
            )
        except PlaywrightTimeoutError as e:
            raise AssertionFailure(
                "student present", name, self.get_student_names()
            ) from e

    def verify_student_count(self, expected: int) -> None:
        """Assert `expected` cards are rendered, waiting for the list to settle."""
        timeout = self.config.default_timeout
        try:
            if expected > 0:
                self.cards.nth(expected - 1).wait_for(state="attached", timeout=timeout)
            self.cards.nth(expected).wait_for(state="detached", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise AssertionFailure("student count", expected, self.get_student_count()) from e
        actual = self.get_student_count()
        if actual != expected:
            raise AssertionFailure("student count", expected, actual)
