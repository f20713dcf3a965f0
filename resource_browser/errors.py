"""Exception hierarchy for the resource browser.

Every error that can end a user-triggered workflow derives from BrowserError,
so UI callbacks can catch one type and report it through Flash.
"""
from typing import Optional


class BrowserError(Exception):
    """Base class for all browser errors."""


class ReadError(BrowserError):
    """A table cell or column could not be read."""


class DaoError(BrowserError):
    """Failure while accessing a resource through its accessor."""


class AccessorError(DaoError):
    """No accessor is registered for a resource kind."""


class CapabilityError(AccessorError):
    """The accessor exists but lacks the requested capability."""


class ApiError(DaoError):
    """
    Transport or HTTP failure talking to the control plane.

    Attributes:
        status: HTTP status code, None for transport failures
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class DeadlineExceeded(DaoError):
    """The execution context expired or was cancelled."""


class ActionError(BrowserError):
    """A user action could not be identified or failed to apply."""
