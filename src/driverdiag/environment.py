"""Host environment queries for the system info line."""

from __future__ import annotations

import logging
import platform
import socket
import threading

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


def _lookup_local_host() -> tuple[str, str]:
    host = socket.gethostname()
    return host, socket.gethostbyname(host)


def resolve_local_host(timeout: float) -> tuple[str, str]:
    """Resolve the local host name and address.

    The lookup runs on a daemon thread so a slow resolver can neither hold up
    the caller for longer than ``timeout`` seconds nor keep the process alive
    at exit.

    Args:
        timeout: Maximum time to wait for the lookup, in seconds.

    Returns:
        A ``(host, ip)`` tuple. Both fields are ``"N/A"`` if the lookup fails
        or does not finish in time.
    """
    outcome: list[tuple[str, str]] = []

    def _run() -> None:
        try:
            outcome.append(_lookup_local_host())
        except Exception as e:
            # Lookup errors never leave this thread.
            logger.debug("Local host lookup failed: %r", e)

    worker = threading.Thread(target=_run, name="driverdiag-host", daemon=True)
    worker.start()
    worker.join(timeout)

    if not outcome:
        if worker.is_alive():
            logger.debug("Local host lookup timed out after %ss", timeout)
        return NOT_AVAILABLE, NOT_AVAILABLE
    return outcome[0]


def describe_system(timeout: float) -> str:
    """Format the host, OS and runtime fingerprint.

    Args:
        timeout: Upper bound for the host lookup, in seconds.

    Returns:
        The ``System info: ...`` line, without a trailing newline.
    """
    host, ip = resolve_local_host(timeout)
    return (
        f"System info: host: '{host}', ip: '{ip}', "
        f"os.name: '{platform.system()}', os.arch: '{platform.machine()}', "
        f"os.version: '{platform.release()}', "
        f"python.version: '{platform.python_version()}'"
    )
