"""
Error Taxonomy

Named failure conditions raised by page objects and helpers. None of these
are caught inside the suite; they propagate to the calling test.
"""
from typing import Any, Optional


class HarmonyE2EError(Exception):
    """Base class for all suite-raised conditions."""

    pass


class ConfigError(HarmonyE2EError):
    """Raised when configuration validation fails."""

    pass


class InvalidArgument(HarmonyE2EError, ValueError):
    """Raised when a helper receives an out-of-range argument."""

    pass


class NavigationTimeout(HarmonyE2EError):
    """Page did not show its primary heading in time."""

    def __init__(self, url: str, heading: str, timeout_ms: int):
        self.url = url
        self.heading = heading
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Navigation to {url} timed out after {timeout_ms}ms "
            f"waiting for heading '{heading}'"
        )


class WaitTimeout(HarmonyE2EError):
    """A bounded wait elapsed."""

    def __init__(self, what: str, timeout_ms: Optional[int] = None):
        self.what = what
        self.timeout_ms = timeout_ms
        suffix = f" after {timeout_ms}ms" if timeout_ms is not None else ""
        super().__init__(f"Timed out waiting for {what}{suffix}")


class ElementNotFound(HarmonyE2EError):
    """A lookup matched zero elements, or more than one."""

    def __init__(self, description: str, count: int = 0):
        self.description = description
        self.count = count
        if count == 0:
            detail = "no matching element"
        else:
            detail = f"{count} matching elements, expected exactly 1"
        super().__init__(f"{description}: {detail}")


class ValidationRejected(HarmonyE2EError):
    """The application refused a create or update."""

    def __init__(self, action: str, message: str):
        self.action = action
        self.message = message
        super().__init__(f"{action} rejected by application: {message}")


class AssertionFailure(HarmonyE2EError, AssertionError):
    """Observed UI state did not match the expected state."""

    def __init__(self, check: str, expected: Any, actual: Any):
        self.check = check
        self.expected = expected
        self.actual = actual
        super().__init__(f"{check}: expected {expected!r}, got {actual!r}")
