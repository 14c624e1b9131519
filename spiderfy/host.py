"""Host-side state around the pure layout: caching, relayout policy and events."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

from .layout import LayoutRecord, compute_layout
from .logging_utils import debug_log_call
from .params import LayoutParameters, get_default_parameters

logger = logging.getLogger(__name__)

Coordinates = Tuple[float, float]
Handler = Callable[..., Any]

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

# Parameters whose change invalidates the cached layout. animate,
# animation_speed and anchor_offset_y are not listed: changing only those
# keeps the previous records.
RELAYOUT_FIELDS: Tuple[str, ...] = (
    "circle_foot_separation",
    "circle_spiral_switchover",
    "spiral_foot_separation",
    "spiral_length_start",
    "spiral_length_factor",
    "anchor_offset_x",
    "force_legs_when_single",
)


class UnknownEventError(KeyError):
    pass


@dataclass(frozen=True)
class EventHandlers:
    """Pointer callbacks the host attaches to every exploded marker."""

    on_click: Optional[Handler] = None
    on_mouse_down: Optional[Handler] = None
    on_mouse_enter: Optional[Handler] = None
    on_mouse_leave: Optional[Handler] = None
    on_mouse_move: Optional[Handler] = None
    on_mouse_out: Optional[Handler] = None
    on_mouse_over: Optional[Handler] = None
    on_mouse_up: Optional[Handler] = None

    def available(self) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)

    def get(self, event: str) -> Optional[Handler]:
        """Look up a handler by ``click``, ``on_click`` or ``onClick`` style names."""

        name = _CAMEL_BOUNDARY_RE.sub("_", event).lower()
        if not name.startswith("on_"):
            name = f"on_{name}"
        if name not in {f.name for f in fields(self)}:
            raise UnknownEventError(event)
        return getattr(self, name)


@dataclass(frozen=True)
class Placement:
    marker: Any
    record: LayoutRecord
    coordinates: Coordinates
    leg_style: Optional[Mapping[str, Any]]
    handlers: EventHandlers


def needs_relayout(
    previous: LayoutParameters,
    current: LayoutParameters,
    previous_count: int,
    count: int,
) -> bool:
    """Return ``True`` when the cached layout no longer matches the inputs."""

    if previous_count != count:
        return True
    return any(getattr(previous, name) != getattr(current, name) for name in RELAYOUT_FIELDS)


def _leg_style(marker: Any) -> Optional[Mapping[str, Any]]:
    if isinstance(marker, Mapping):
        return marker.get("leg_style")
    return getattr(marker, "leg_style", None)


def _present(markers: Iterable[Any]) -> List[Any]:
    return [marker for marker in markers if marker is not None]


class Spiderifier:
    """Markers exploded around ``coordinates`` with a cached layout.

    ``None`` entries in ``markers`` are skipped and do not receive an index.
    Instances are not thread-safe.
    """

    def __init__(
        self,
        coordinates: Coordinates,
        markers: Sequence[Any] = (),
        params: Optional[LayoutParameters] = None,
        handlers: Optional[EventHandlers] = None,
    ) -> None:
        self.coordinates = (float(coordinates[0]), float(coordinates[1]))
        self.handlers = handlers or EventHandlers()
        self._markers = _present(markers)
        self._params = params if params is not None else get_default_parameters()
        self._records = self._relayout()

    @property
    def markers(self) -> Tuple[Any, ...]:
        return tuple(self._markers)

    @property
    def params(self) -> LayoutParameters:
        return self._params

    @property
    def records(self) -> Tuple[LayoutRecord, ...]:
        return self._records

    @debug_log_call(logger, log_result=False)
    def _relayout(self) -> Tuple[LayoutRecord, ...]:
        return compute_layout(len(self._markers), self._params)

    def update(
        self,
        *,
        markers: Optional[Sequence[Any]] = None,
        params: Optional[LayoutParameters] = None,
    ) -> bool:
        """Replace markers and/or parameters; return whether the layout was recomputed."""

        new_markers = _present(markers) if markers is not None else self._markers
        new_params = params if params is not None else self._params
        changed = needs_relayout(self._params, new_params, len(self._markers), len(new_markers))

        self._markers = new_markers
        self._params = new_params
        if changed:
            self._records = self._relayout()
            logger.info("Recomputed layout for %d marker(s)", len(self._markers))
        else:
            logger.debug("Keeping cached layout for %d marker(s)", len(self._markers))
        return changed

    def placements(self) -> List[Placement]:
        if not self._records:
            return []
        return [
            Placement(
                marker=marker,
                record=record,
                coordinates=self.coordinates,
                leg_style=_leg_style(marker),
                handlers=self.handlers,
            )
            for marker, record in zip(self._markers, self._records)
        ]

    def dispatch(self, event: str, index: int, *args: Any, **kwargs: Any) -> Any:
        """Invoke the ``event`` handler for the marker at ``index``.

        The handler receives the marker and its record ahead of any extra
        arguments. Returns ``None`` when no handler is registered.
        """

        handler = self.handlers.get(event)
        if not 0 <= index < len(self._records):
            raise IndexError(f"no exploded marker at index {index}")
        if handler is None:
            logger.debug("No %s handler registered", event)
            return None
        return handler(self._markers[index], self._records[index], *args, **kwargs)


__all__ = [
    "EventHandlers",
    "Placement",
    "RELAYOUT_FIELDS",
    "Spiderifier",
    "UnknownEventError",
    "needs_relayout",
]
