"""Custom exceptions for driverdiag.

Every failure raised by a driver derives from :class:`WebDriverException`,
whose message is enriched with build, host and driver details each time it is
read.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable

from .buildinfo import BuildInfo
from .config import get_settings
from .environment import describe_system
from .stack import capture_stack, get_driver_name


def _describe(cause: BaseException) -> str:
    """Render an exception the way a traceback's last line does."""
    text = str(cause)
    name = type(cause).__name__
    return f"{name}: {text}" if text else name


class WebDriverException(Exception):
    """Base exception class for all driverdiag failures.

    Carries an optional message, an optional cause and an optional legacy
    status code. Callers may attach key/value annotations with
    :meth:`add_info` while the failure propagates; they are rendered, along
    with build and system details, whenever the message is read.
    """

    SESSION_ID = "Session ID"
    DRIVER_INFO = "Driver info"
    BASE_SUPPORT_URL = "http://seleniumhq.org/exceptions/"

    def __init__(
        self,
        message: str | None = None,
        cause: BaseException | None = None,
        status_code: int | None = None,
    ) -> None:
        """Initialize the failure.

        Args:
            message: Human readable description. Defaults to the description
                of ``cause`` when only a cause is given.
            cause: The exception that triggered this failure.
            status_code: Legacy numeric status reported by a remote end.
        """
        if message is None and cause is not None:
            message = _describe(cause)
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

        self._message = message
        self._status_code = status_code
        self._extra_info: dict[str, str | None] = {}
        self._stack = capture_stack(skip=1)

    @property
    def message(self) -> str | None:
        """The message given at construction, without diagnostics."""
        return self._message

    @property
    def cause(self) -> BaseException | None:
        """The exception that triggered this failure, if any."""
        return self.__cause__

    @property
    def stack(self) -> list[str]:
        """Frame type names captured at construction, innermost first."""
        return list(self._stack)

    def get_status_code(self) -> int | None:
        """Return the status code reported by the remote end, if any.

        Deprecated: only kept so a server can map remote failures back to
        clients without losing the original status.
        """
        warnings.warn(
            "get_status_code() is deprecated; status codes will be replaced by error names.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._status_code

    def add_info(self, key: str, value: str | None) -> None:
        """Attach an annotation, replacing any previous value for ``key``."""
        self._extra_info[key] = value

    def get_message(self) -> str:
        """Build the full diagnostic message.

        Returns:
            The original message followed by the support link (if any), the
            build info, the system info and every annotation.
        """
        support_url = self.get_support_url()
        support_message = (
            ""
            if support_url is None
            else f"For documentation on this error, please visit: {support_url}\n"
        )
        original = "" if self._message is None else f"{self._message}\n"

        return (
            original
            + support_message
            + f"{self.get_build_information()}\n"
            + self.get_system_information()
            + self.get_additional_information()
        )

    def __str__(self) -> str:
        return self.get_message()

    def get_support_url(self) -> str | None:
        """Documentation link for this kind of failure; ``None`` by default."""
        return None

    def get_build_information(self) -> BuildInfo:
        return BuildInfo()

    def get_system_information(self) -> str:
        return describe_system(get_settings().host_lookup_timeout)

    @staticmethod
    def get_driver_name(frames: Iterable[str]) -> str:
        """Infer the driver name from frame type names. See :func:`get_driver_name`."""
        return get_driver_name(frames)

    def get_additional_information(self) -> str:
        """Render the annotations, adding ``Driver info`` when it is missing.

        A value that already starts with its key is printed on its own so the
        label is not repeated.
        """
        if self.DRIVER_INFO not in self._extra_info:
            self._extra_info[self.DRIVER_INFO] = (
                f"driver.version: {self.get_driver_name(self._stack)}"
            )

        result = ""
        for key, value in list(self._extra_info.items()):
            if isinstance(value, str) and value.startswith(key):
                result += f"\n{value}"
            else:
                result += f"\n{key}: {value}"
        return result

    def copy(self) -> WebDriverException:
        """Return a failure of the same kind with its own annotation map."""
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone.args = self.args
        clone.__cause__ = self.__cause__
        clone._extra_info = dict(self._extra_info)
        clone._stack = list(self._stack)
        return clone


class NoSuchElementException(WebDriverException):
    """Raised when no element matches a locator."""

    def get_support_url(self) -> str | None:
        return get_settings().support_base_url + "no_such_element.html"


class InvalidSelectorException(NoSuchElementException):
    """Raised when a locator is malformed and cannot be evaluated."""

    def get_support_url(self) -> str | None:
        return get_settings().support_base_url + "invalid_selector_exception.html"


class StaleElementReferenceException(WebDriverException):
    """Raised when a previously found element is no longer attached to the page."""

    def get_support_url(self) -> str | None:
        return get_settings().support_base_url + "stale_element_reference.html"


class TimeoutException(WebDriverException):
    """Raised when a command does not complete in time."""


class JavascriptException(WebDriverException):
    """Raised when a script executed in the page throws."""


class NoSuchWindowException(WebDriverException):
    """Raised when the targeted tab or window is gone."""


class SessionNotCreatedException(WebDriverException):
    """Raised when the browser session cannot be started.

    Common causes include:
    - Missing browser executable
    - Port conflicts
    - Invalid profile directory permissions
    """


class NoSuchSessionException(WebDriverException):
    """Raised when a command is sent to a driver whose browser has been closed."""
