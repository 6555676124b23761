"""Call-stack introspection used to label the driver behind a failure."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from types import FrameType

UNKNOWN_DRIVER = "unknown"


def frame_type_name(frame: FrameType) -> str:
    """Return the fully qualified type name of the code running in ``frame``.

    Methods resolve to ``module.Owner`` (nested owners keep their dotted
    qualname), module-level functions to the bare module name.
    """
    module = frame.f_globals.get("__name__", "")
    owner, _, _ = frame.f_code.co_qualname.rpartition(".")
    if not owner:
        return module
    return f"{module}.{owner}" if module else owner


def capture_stack(skip: int = 0) -> list[str]:
    """Capture the type names of the caller's stack, innermost frame first.

    Args:
        skip: Number of additional frames above the caller to leave out.

    Returns:
        One type name per frame, ordered from the capture point outward.
    """
    frame: FrameType | None = sys._getframe(skip + 1)
    names: list[str] = []
    while frame is not None:
        names.append(frame_type_name(frame))
        frame = frame.f_back
    return names


def get_driver_name(frames: Iterable[str]) -> str:
    """Infer the driver name from a sequence of frame type names.

    Every name ending in ``Driver`` is a candidate; its last dotted segment is
    taken and the last candidate in the sequence wins.
    """
    driver_name = UNKNOWN_DRIVER
    for type_name in frames:
        if type_name.endswith("Driver"):
            driver_name = type_name.split(".")[-1]
    return driver_name
