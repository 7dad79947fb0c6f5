"""
Schedule Page Object

Encapsulates the calendar screen: day selection, the selected-day header,
and event create / edit / delete through the event dialog.
"""
import logging
import re
from dataclasses import asdict
from datetime import date
from typing import Dict, List, Optional, Pattern

from playwright.sync_api import Locator, Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..config import E2EConfig
from ..data import SCHEDULE_PAGE_HEADING, SCHEDULE_PAGE_SUBTITLE
from ..dates import MONTH_NAMES, WEEKDAY_NAMES, DateFormatter
from ..errors import AssertionFailure, ElementNotFound, WaitTimeout
from ..models import EventPatch, EventRecord
from .base_page import BasePage, exact_text

logger = logging.getLogger(__name__)


def day_label_pattern(d: date) -> Pattern:
    """Accessible name of a calendar day button.

    Day pickers label cells "Tuesday, December 30, 2025" or with an ordinal
    ("December 30th"); both are accepted.
    """
    weekday = WEEKDAY_NAMES[d.weekday()]
    month = MONTH_NAMES[d.month - 1]
    return re.compile(rf"^(Today, )?{weekday}, {month} {d.day}(st|nd|rd|th)?, {d.year}")


class EventCard:
    """Handle to one rendered event card."""

    LOCATION = '[data-testid="event-location"], .event-location'
    DESCRIPTION = '[data-testid="event-description"], .event-description'

    def __init__(self, locator: Locator, title: str):
        self.locator = locator
        self.title = title

    def text(self) -> str:
        return self.locator.inner_text()

    def contains(self, text: str) -> bool:
        return text in self.text()

    def location(self) -> str:
        return self._child_text(self.LOCATION)

    def description(self) -> str:
        return self._child_text(self.DESCRIPTION)

    def _child_text(self, selector: str) -> str:
        elem = self.locator.locator(selector)
        return elem.first.inner_text().strip() if elem.count() > 0 else ""

    def expect_contains(self, text: str) -> None:
        """Playwright assertion, retried until the default timeout."""
        expect(self.locator).to_contain_text(text)

    def __repr__(self) -> str:
        return f"EventCard({self.title!r})"


class SchedulePage(BasePage):
    """Page object for the schedule and calendar."""

    PATH = "/schedule"
    HEADING = SCHEDULE_PAGE_HEADING
    SUBTITLE = SCHEDULE_PAGE_SUBTITLE

    # Selectors
    CALENDAR = '[role="grid"]'
    SELECTED_DAY_HEADER = '[data-testid="selected-day-header"], .selected-day-header'
    EVENT_CARD = '[data-testid="event-card"], .event-card'
    EVENT_TITLE = '[data-testid="event-title"], .event-title'

    ADD_BUTTON_NAME = "Add Event"
    EDIT_BUTTON_NAME = "Edit"
    DELETE_BUTTON_NAME = "Delete"
    UPDATE_BUTTON = re.compile(r"^(Update|Save)")
    CONFIRM_BUTTON = re.compile(r"^(Delete|Confirm|Yes)")

    # Dialog labels, in form order
    TEXT_FIELDS: Dict[str, str] = {
        "title": "Event Title",
        "subject": "Subject",
        "start_time": "Start Time",
        "end_time": "End Time",
        "location": "Location",
        "attendees": "Expected Attendees",
        "description": "Description",
    }
    TYPE_LABEL = "Event Type"

    def __init__(
        self,
        page: Page,
        config: Optional[E2EConfig] = None,
        formatter: Optional[DateFormatter] = None,
    ):
        super().__init__(page, config)
        self.formatter = formatter or DateFormatter(self.config.timezone)

    def navigate(self) -> "SchedulePage":
        """Navigate to the schedule page."""
        super().navigate()
        return self

    # =========================================================================
    # Calendar
    # =========================================================================

    @property
    def calendar(self) -> Locator:
        return self.locator(self.CALENDAR)

    def day_cell(self, d: date) -> Locator:
        return self.calendar.get_by_role("button", name=day_label_pattern(d))

    def click_day(self, d: date) -> None:
        """Select a calendar day; the month containing it must be shown."""
        self.single(self.day_cell(d), f"calendar cell for {d.isoformat()}").click()

    def click_today(self) -> None:
        today = self.formatter.today()
        logger.info("Selecting today (%s)", today.isoformat())
        self.click_day(today)

    def get_schedule_header_text(self) -> str:
        header = self.single(self.locator(self.SELECTED_DAY_HEADER), "selected day header")
        return (header.text_content() or "").strip()

    def verify_todays_date(self) -> None:
        """Assert the selected-day header shows today's long date."""
        expected = self.formatter.formatted_long_date()
        actual = self.get_schedule_header_text()
        if expected not in actual:
            raise AssertionFailure("schedule header contains today", expected, actual)

    # =========================================================================
    # Event Listing
    # =========================================================================

    @property
    def cards(self) -> Locator:
        return self.locator(self.EVENT_CARD)

    def get_event_count(self) -> int:
        return self.cards.count()

    def get_event_titles(self) -> List[str]:
        return self.texts(self.cards.locator(self.EVENT_TITLE))

    def _cards_titled(self, title: str) -> Locator:
        return self.cards.filter(
            has=self.locator(self.EVENT_TITLE).filter(has_text=exact_text(title))
        )

    def find_event(self, title: str) -> Locator:
        """The one card whose title equals `title`.

        Waits up to the default timeout for a matching card to render.
        Raises ElementNotFound for no match or an ambiguous match.
        """
        description = f"event card titled '{title}'"
        matches = self._cards_titled(title)
        try:
            matches.first.wait_for(state="visible", timeout=self.config.default_timeout)
        except PlaywrightTimeoutError as e:
            raise ElementNotFound(description, 0) from e
        return self.single(matches, description)

    def get_event_card_by_title(self, title: str) -> EventCard:
        return EventCard(self.find_event(title), title)

    # =========================================================================
    # Create / Edit / Delete
    # =========================================================================

    def open_add_dialog(self) -> Locator:
        trigger = self.get_by_role("button", name=self.ADD_BUTTON_NAME, exact=True)
        return self.open_dialog(trigger.first, "Add Event")

    def fill_event_form(self, dialog: Locator, values: Dict[str, object]) -> None:
        """Write the given fields; anything absent from `values` is untouched."""
        for attr, label in self.TEXT_FIELDS.items():
            if attr in values:
                self.fill_field(dialog, label, values[attr])
        if "type" in values:
            self.choose(dialog, self.TYPE_LABEL, values["type"].value)

    def add_event(self, record: EventRecord) -> None:
        """Create an event on the selected day.

        Time ordering is left to the app; a refusal surfaces as
        ValidationRejected.
        """
        logger.info("Adding event '%s' %s-%s", record.title, record.start_time, record.end_time)
        dialog = self.open_add_dialog()
        self.fill_event_form(dialog, asdict(record))
        dialog.get_by_role("button", name=self.ADD_BUTTON_NAME, exact=True).click()
        self.wait_for_dialog_closed("Add Event")

    def edit_event(self, original_title: str, patch: EventPatch) -> None:
        """Overwrite only the fields present in `patch` on one event."""
        card = self.find_event(original_title)
        changes = patch.present_fields()
        logger.info("Editing event '%s': %s", original_title, sorted(changes))

        card.get_by_role("button", name=self.EDIT_BUTTON_NAME).click()
        self.wait_visible(self.dialog, "Edit Event dialog")
        self.fill_event_form(self.dialog, changes)
        self.dialog.get_by_role("button", name=self.UPDATE_BUTTON).click()
        self.wait_for_dialog_closed("Edit Event")

    def delete_event(self, title: str) -> None:
        """Delete one event and wait until its card is gone."""
        card = self.find_event(title)
        logger.info("Deleting event '%s'", title)
        card.get_by_role("button", name=self.DELETE_BUTTON_NAME).click()

        confirm = self.get_by_role("alertdialog").get_by_role("button", name=self.CONFIRM_BUTTON)
        if confirm.count() > 0:
            confirm.first.click()

        timeout = self.config.default_timeout
        try:
            self._cards_titled(title).first.wait_for(state="detached", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise WaitTimeout(f"event '{title}' to be removed", timeout) from e
        logger.debug("Event '%s' removed", title)

    # =========================================================================
    # Assertions
    # =========================================================================

    def verify_event_present(self, title: str) -> None:
        """Assert exactly one card carries `title`."""
        try:
            self.find_event(title)
        except ElementNotFound as e:
            raise AssertionFailure("event present", title, self.get_event_titles()) from e

    def verify_event_absent(self, title: str) -> None:
        """Assert no card carries `title` once rendering settles."""
        cards = self._cards_titled(title)
        try:
            cards.first.wait_for(state="detached", timeout=self.config.default_timeout)
        except PlaywrightTimeoutError as e:
            raise AssertionFailure(f"cards titled '{title}'", 0, cards.count()) from e

