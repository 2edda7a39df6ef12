"""Semantics events sent to the platform accessibility layer.

A semantics event is a small immutable record that describes itself as a
key-ordered map for the platform channel and as a one-line string for
debugging. The set of events is closed: every variant is defined in this
module, and ``SemanticsEvent`` is the union of all of them.

Map layout:
    {"type": <event type>, "nodeId": <node id, if given>, "data": {...}}

String layout:
    ClassName(key: value, ...)  # data keys sorted

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol, final

from l10ntools.enums import SemanticsEventType, TextDirection

__all__ = [
    "AnnounceSemanticsEvent",
    "LongPressSemanticsEvent",
    "SemanticsEvent",
    "TapSemanticEvent",
    "TooltipSemanticsEvent",
]


class _EventPayload(Protocol):
    """What every event variant provides to the shared rendering."""

    event_type: ClassVar[SemanticsEventType]

    def get_data_map(self) -> dict[str, object]:
        """Return the event payload in wire key order."""
        ...


class _SemanticsEventRecord:
    """Shared map and string rendering for the event variants.

    Variants supply ``event_type`` and ``get_data_map()`` (see _EventPayload).
    Subclassing is restricted to this module.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Reject variants defined outside this module."""
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            msg = f"{cls.__qualname__}: semantics events are a closed set"
            raise TypeError(msg)

    def to_map(self: _EventPayload, *, node_id: int | None = None) -> dict[str, object]:
        """Describe the event for the platform channel.

        Args:
            node_id: Semantics node the event originates from, if any

        Example:
            >>> TooltipSemanticsEvent("Save").to_map(node_id=3)
            {'type': 'tooltip', 'nodeId': 3, 'data': {'message': 'Save'}}
        """
        result: dict[str, object] = {"type": str(self.event_type)}
        if node_id is not None:
            result["nodeId"] = node_id
        result["data"] = self.get_data_map()
        return result

    def __str__(self: _EventPayload) -> str:
        """Return ``ClassName(key: value, ...)`` with data keys sorted."""
        data = self.get_data_map()
        pairs = ", ".join(f"{key}: {data[key]}" for key in sorted(data))
        return f"{type(self).__name__}({pairs})"


@final
@dataclass(frozen=True, slots=True)
class AnnounceSemanticsEvent(_SemanticsEventRecord):
    """Request that the screen reader announce a message.

    Attributes:
        message: Text to announce
        text_direction: Reading direction of message
    """

    event_type: ClassVar[SemanticsEventType] = SemanticsEventType.ANNOUNCE

    message: str
    text_direction: TextDirection = TextDirection.LTR

    def get_data_map(self) -> dict[str, object]:
        return {"message": self.message, "textDirection": str(self.text_direction)}


@final
@dataclass(frozen=True, slots=True)
class TooltipSemanticsEvent(_SemanticsEventRecord):
    """A tooltip was shown."""

    event_type: ClassVar[SemanticsEventType] = SemanticsEventType.TOOLTIP

    message: str

    def get_data_map(self) -> dict[str, object]:
        return {"message": self.message}


@final
@dataclass(frozen=True, slots=True)
class LongPressSemanticsEvent(_SemanticsEventRecord):
    """A node was long-pressed."""

    event_type: ClassVar[SemanticsEventType] = SemanticsEventType.LONG_PRESS

    def get_data_map(self) -> dict[str, object]:
        return {}


@final
@dataclass(frozen=True, slots=True)
class TapSemanticEvent(_SemanticsEventRecord):
    """A node was tapped."""

    event_type: ClassVar[SemanticsEventType] = SemanticsEventType.TAP

    def get_data_map(self) -> dict[str, object]:
        return {}


type SemanticsEvent = (
    AnnounceSemanticsEvent
    | TooltipSemanticsEvent
    | LongPressSemanticsEvent
    | TapSemanticEvent
)
"""Any semantics event."""
