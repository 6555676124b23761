import logging

from .buildinfo import BuildInfo
from .config import DiagnosticsSettings, get_settings
from .driver import ChromiumDriver
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
from .logger import setup_logging
from .stack import get_driver_name

__version__ = "1.0.0"

# Add NullHandler to prevent logging warnings if no handler is configured by the user.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BuildInfo",
    "ChromiumDriver",
    "DiagnosticsSettings",
    "InvalidSelectorException",
    "JavascriptException",
    "NoSuchElementException",
    "NoSuchSessionException",
    "NoSuchWindowException",
    "SessionNotCreatedException",
    "StaleElementReferenceException",
    "TimeoutException",
    "WebDriverException",
    "get_driver_name",
    "get_settings",
    "setup_logging",
]
