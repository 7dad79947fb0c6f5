"""
Base Page Object

Provides common functionality for all page objects, plus the translation of
Playwright timeouts and lookup failures into the suite's named conditions.
"""
import logging
import re
from typing import List, Optional, Pattern, Union

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..config import E2EConfig
from ..errors import (
    AssertionFailure,
    ElementNotFound,
    NavigationTimeout,
    ValidationRejected,
    WaitTimeout,
)

logger = logging.getLogger(__name__)


def exact_text(text: str) -> Pattern:
    """Regex matching an element whose whole text is `text`."""
    return re.compile(rf"^\s*{re.escape(text)}\s*$")


class BasePage:
    """Base class for all page objects."""

    PATH = "/"
    HEADING = ""
    SUBTITLE = ""

    DIALOG = '[role="dialog"]'
    VALIDATION_MESSAGE = (
        '[role="alert"], [data-testid="form-error"], .error-message, .text-destructive'
    )
    INVALID_FIELD = "input:invalid, select:invalid, textarea:invalid"

    def __init__(self, page: Page, config: Optional[E2EConfig] = None):
        self.page = page
        self.config = config or E2EConfig.load()
        self.base_url = self.config.base_url

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = "") -> None:
        """Navigate to a path relative to base URL."""
        self.page.goto(f"{self.base_url}{path}")

    def navigate(self) -> "BasePage":
        """Load this page and wait for its primary heading."""
        url = f"{self.base_url}{self.PATH}"
        logger.info("Navigating to %s", url)
        self.goto(self.PATH)
        timeout = self.config.navigation_timeout
        try:
            self.heading.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise NavigationTimeout(url, self.HEADING, timeout) from e
        return self

    # =========================================================================
    # Locators
    # =========================================================================

    def locator(self, selector: str) -> Locator:
        """Get a locator for the selector."""
        return self.page.locator(selector)

    def get_by_role(self, role: str, **kwargs) -> Locator:
        """Get element by ARIA role."""
        return self.page.get_by_role(role, **kwargs)

    def get_by_text(self, text: str, exact: bool = False) -> Locator:
        """Get element by text content."""
        return self.page.get_by_text(text, exact=exact)

    @property
    def heading(self) -> Locator:
        """Primary page heading."""
        return self.get_by_role("heading", name=self.HEADING, exact=True)

    @property
    def subtitle(self) -> Locator:
        return self.get_by_text(self.SUBTITLE, exact=True)

    @property
    def dialog(self) -> Locator:
        return self.locator(self.DIALOG)

    # =========================================================================
    # Lookups
    # =========================================================================

    def single(self, locator: Locator, description: str) -> Locator:
        """Resolve a locator that must match exactly one element."""
        count = locator.count()
        logger.debug("%s: %d match(es)", description, count)
        if count != 1:
            raise ElementNotFound(description, count)
        return locator.first

    def texts(self, locator: Locator) -> List[str]:
        """Stripped inner text of every match, in DOM order."""
        return [text.strip() for text in locator.all_inner_texts()]

    # =========================================================================
    # Waiting
    # =========================================================================

    def wait_visible(self, locator: Locator, what: str, timeout: Optional[int] = None) -> None:
        """Wait for element to become visible; raises WaitTimeout."""
        timeout = timeout or self.config.default_timeout
        try:
            locator.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise WaitTimeout(what, timeout) from e

    def wait_for_dialog_closed(self, action: str, timeout: Optional[int] = None) -> None:
        """Wait for the open dialog to go away after a submit.

        A dialog that stays open with a visible validation message, or with a
        field the browser considers invalid, is a rejection by the app.
        """
        timeout = timeout or self.config.default_timeout
        try:
            self.dialog.wait_for(state="hidden", timeout=timeout)
        except PlaywrightTimeoutError as e:
            message = self.rejection_message()
            if message is not None:
                logger.warning("%s rejected: %s", action, message)
                raise ValidationRejected(action, message) from e
            raise WaitTimeout(f"{action} dialog to close", timeout) from e
        logger.debug("%s dialog closed", action)

    def rejection_message(self) -> Optional[str]:
        """Validation text shown inside the open dialog, if any."""
        errors = self.dialog.locator(self.VALIDATION_MESSAGE)
        if errors.count() > 0 and errors.first.is_visible():
            return (errors.first.text_content() or "").strip()

        invalid = self.dialog.locator(self.INVALID_FIELD)
        if invalid.count() > 0:
            field = invalid.first
            name = field.get_attribute("name") or field.get_attribute("id") or "field"
            detail = field.evaluate("el => el.validationMessage")
            return f"{name}: {detail}"
        return None

    # =========================================================================
    # Forms
    # =========================================================================

    def open_dialog(self, trigger: Locator, what: str) -> Locator:
        """Click a trigger and wait for the dialog it opens."""
        trigger.click()
        self.wait_visible(self.dialog, f"{what} dialog")
        return self.dialog

    def close_dialog(self) -> None:
        """Dismiss any open dialog."""
        if self.dialog.count() == 0:
            return
        self.page.keyboard.press("Escape")
        timeout = self.config.default_timeout
        try:
            self.dialog.wait_for(state="hidden", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise WaitTimeout("dialog to be dismissed", timeout) from e

    def fill_field(self, scope: Locator, label: str, value: Union[str, int]) -> None:
        """Fill a labelled input inside `scope`."""
        scope.get_by_label(label, exact=True).fill(str(value))

    def choose(self, scope: Locator, label: str, value: str) -> None:
        """Pick a value from a labelled native select or ARIA combobox."""
        control = scope.get_by_label(label, exact=True)
        if control.evaluate("el => el.tagName") == "SELECT":
            control.select_option(value)
            return
        control.click()
        self.single(
            self.get_by_role("option", name=value, exact=True), f"'{label}' option '{value}'"
        ).click()

    # =========================================================================
    # Assertions
    # =========================================================================

    def verify_page_title(self) -> None:
        """Assert heading and subtitle match the expected fixed strings."""
        self._expect_text("page heading", self.heading, self.HEADING)
        self._expect_text("page subtitle", self.subtitle, self.SUBTITLE)

    def _expect_text(self, check: str, locator: Locator, expected: str) -> None:
        actual = (locator.first.text_content() or "").strip() if locator.count() > 0 else None
        if actual != expected:
            raise AssertionFailure(check, expected, actual)

