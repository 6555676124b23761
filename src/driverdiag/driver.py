"""Chromium driver that reports its failures as annotated WebDriverExceptions."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import Any, Callable, TypeVar

from DrissionPage import ChromiumOptions, ChromiumPage

from .exceptions import (
    InvalidSelectorException,
    JavascriptException,
    NoSuchElementException,
    NoSuchSessionException,
    NoSuchWindowException,
    SessionNotCreatedException,
    StaleElementReferenceException,
    TimeoutException,
    WebDriverException,
)

logger = logging.getLogger(__name__)

# Type alias for page factory
PageFactory = Callable[[ChromiumOptions], ChromiumPage]

T = TypeVar("T")

# DrissionPage error class names mapped to the failure kind they represent.
ERROR_TRANSLATIONS: dict[str, type[WebDriverException]] = {
    "ElementNotFoundError": NoSuchElementException,
    "LocatorError": InvalidSelectorException,
    "ElementLostError": StaleElementReferenceException,
    "ContextLostError": StaleElementReferenceException,
    "WaitTimeoutError": TimeoutException,
    "TimeoutError": TimeoutException,
    "JavaScriptError": JavascriptException,
    "PageDisconnectedError": NoSuchWindowException,
    "TargetNotFoundError": NoSuchWindowException,
    "BrowserConnectError": SessionNotCreatedException,
}


def translate_error(error: BaseException) -> WebDriverException:
    """Wrap a browser backend error in the matching failure kind.

    The error's class hierarchy is searched from the most specific class
    upward; errors with no known ancestor become a plain
    :class:`WebDriverException`.
    """
    if isinstance(error, WebDriverException):
        return error
    for klass in type(error).__mro__:
        failure_class = ERROR_TRANSLATIONS.get(klass.__name__)
        if failure_class is not None:
            return failure_class(cause=error)
    return WebDriverException(cause=error)


class ChromiumDriver:
    """Drives a Chromium browser through DrissionPage.

    Every command runs through :meth:`execute`, so any failure reaches the
    caller as a :class:`WebDriverException` annotated with the session id,
    the driver name, the capabilities and the failing command.

    Attributes:
        profile_dir: Path to the browser profile directory.
        headless: Whether the browser runs in headless mode.
    """

    def __init__(
        self,
        profile_dir: str | Path = "./browser_data",
        headless: bool = True,
        page_factory: PageFactory | None = None,
    ) -> None:
        """Start the browser.

        Args:
            profile_dir: Directory path for the user data profile.
            headless: Run browser in headless mode.
            page_factory: Optional callable to create browser pages (for testing/DI).

        Raises:
            SessionNotCreatedException: If the browser fails to start.
        """
        self.profile_dir = Path(profile_dir)
        self.headless = headless
        self._page_factory = page_factory
        self._page: ChromiumPage | None = None
        self._start_browser()

    def _start_browser(self) -> None:
        try:
            options = ChromiumOptions()
            options.set_user_data_path(str(self.profile_dir))
            options.headless(self.headless)

            if self._page_factory:
                self._page = self._page_factory(options)
            else:
                self._page = ChromiumPage(options)
        except Exception as e:
            # DrissionPage raises a variety of errors while launching
            error = SessionNotCreatedException(f"Failed to start browser: {e}", cause=e)
            self._annotate(error, "start")
            raise error from e
        logger.debug("Browser session %s started", self.session_id)

    @property
    def page(self) -> ChromiumPage:
        """Return the active DrissionPage instance.

        Raises:
            NoSuchSessionException: If the browser has been closed.
        """
        if self._page is None:
            raise NoSuchSessionException("Browser session has been closed.")
        return self._page

    @property
    def session_id(self) -> str | None:
        """Identifier of the controlled tab, if a browser is running."""
        if self._page is None:
            return None
        return getattr(self._page, "tab_id", None)

    @property
    def capabilities(self) -> dict[str, Any]:
        return {
            "browserName": "chromium",
            "headless": self.headless,
            "userDataDir": str(self.profile_dir),
        }

    def _annotate(self, error: WebDriverException, command: str) -> None:
        session_id = self.session_id
        if session_id is not None:
            error.add_info(WebDriverException.SESSION_ID, session_id)
        error.add_info(
            WebDriverException.DRIVER_INFO, f"driver.version: {type(self).__name__}"
        )
        error.add_info("Capabilities", f"Capabilities {self.capabilities}")
        error.add_info("Command", command)

    def execute(self, command: str, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run a browser command, converting failures into WebDriverExceptions.

        Args:
            command: Name reported in the ``Command`` annotation.
            fn: Callable performing the command.
            *args: Positional arguments for ``fn``.
            **kwargs: Keyword arguments for ``fn``.

        Returns:
            Whatever ``fn`` returns.

        Raises:
            WebDriverException: If ``fn`` raises. Backend errors are wrapped
                in the matching subclass and chained.
        """
        try:
            return fn(*args, **kwargs)
        except WebDriverException as e:
            self._annotate(e, command)
            raise
        except Exception as e:
            error = translate_error(e)
            self._annotate(error, command)
            logger.debug("Command %s failed: %r", command, e)
            raise error from e

    def get(self, url: str) -> None:
        """Navigate the current tab to ``url``."""
        self.execute("get", lambda: self.page.get(url))

    def find(self, locator: str, timeout: float | None = None) -> Any:
        """Find the first element matching a DrissionPage locator.

        Raises:
            NoSuchElementException: If nothing matches within ``timeout``.
        """

        def _find() -> Any:
            element = self.page.ele(locator, timeout=timeout)
            if not element:
                raise NoSuchElementException(f"Unable to locate element: {locator}")
            return element

        return self.execute("find", _find)

    def execute_script(self, script: str, *args: Any) -> Any:
        """Run JavaScript in the current tab and return its result."""
        return self.execute("execute_script", lambda: self.page.run_js(script, *args))

    def quit(self) -> None:
        """Close the browser. Calling it again is a no-op."""
        if self._page is None:
            return
        page, self._page = self._page, None
        try:
            page.quit()
        except Exception as e:
            logger.warning(f"Error closing browser: {e}")

    def __enter__(self) -> ChromiumDriver:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.quit()
