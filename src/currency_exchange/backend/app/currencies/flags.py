"""Fallback handling for flag images that fail to load.

The browser client binds :func:`handle_flag_error` to image ``error`` events.
Elements are described structurally so the handler works with any element
tree that exposes the same small surface (server-side renderers, test doubles).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableMapping, Protocol

FALLBACK_BADGE_CLASS = (
    "w-6 h-6 rounded-full bg-gray-200 flex items-center justify-center text-xs font-bold"
)
UNKNOWN_FLAG_LABEL = "??"


@dataclass
class FallbackBadge:
    """Placeholder element shown in place of a broken flag image."""

    text_content: str
    class_name: str = FALLBACK_BADGE_CLASS
    tag_name: str = "div"


class FlagContainer(Protocol):
    def append_child(self, element: FallbackBadge) -> object: ...


class FlagImage(Protocol):
    alt: str | None
    style: MutableMapping[str, str]
    parent: FlagContainer | None


class FlagErrorEvent(Protocol):
    target: FlagImage


def flag_fallback_label(alt: str | None) -> str:
    """Return the badge text for an image with accessible text ``alt``."""

    return alt[:2] if alt else UNKNOWN_FLAG_LABEL


def handle_flag_error(event: FlagErrorEvent) -> FallbackBadge | None:
    """Hide the failed image and append a text badge to its container."""

    image = event.target
    image.style["display"] = "none"

    parent = image.parent
    if parent is None:
        return None

    badge = FallbackBadge(text_content=flag_fallback_label(image.alt))
    parent.append_child(badge)
    return badge


__all__ = [
    "FALLBACK_BADGE_CLASS",
    "FallbackBadge",
    "FlagContainer",
    "FlagErrorEvent",
    "FlagImage",
    "UNKNOWN_FLAG_LABEL",
    "flag_fallback_label",
    "handle_flag_error",
]
