"""Build identification for driverdiag."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version

from .config import get_settings

DISTRIBUTION_NAME = "driverdiag"


def _release_label() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "unknown"


def _build_revision() -> str:
    return get_settings().build_revision


def _build_time() -> str:
    return get_settings().build_time


@dataclass(frozen=True)
class BuildInfo:
    """Version, revision and build time of the running library.

    Attributes:
        release_label: Installed distribution version.
        build_revision: Source revision the build was made from.
        build_time: Timestamp of the build.
    """

    release_label: str = field(default_factory=_release_label)
    build_revision: str = field(default_factory=_build_revision)
    build_time: str = field(default_factory=_build_time)

    def __str__(self) -> str:
        return (
            f"Build info: version: '{self.release_label}', "
            f"revision: '{self.build_revision}', time: '{self.build_time}'"
        )
