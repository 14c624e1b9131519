"""Circle and spiral placement of markers sharing one anchor point."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .logging_utils import debug_log_call
from .params import LayoutParameters, get_default_parameters

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi

# Extra angle added per spiral index; keeps markers at moderate counts from
# landing on top of each other.
SPIRAL_ANGLE_NUDGE = 0.0005

# Pads the circle circumference by this many feet so low counts are not crowded.
CIRCLE_CIRCUMFERENCE_PAD = 2


class LayoutMode(enum.Enum):
    CIRCLE = "circle"
    SPIRAL = "spiral"


@dataclass(frozen=True)
class LayoutRecord:
    """Placement of a single marker relative to the anchor."""

    index: int
    angle: float
    # Radial distance minus anchor_offset_x, while x has the offset added.
    # Consumers depend on both fields, so the asymmetry is kept as is.
    leg_length: float
    x: float
    y: float
    transition_delay: float
    animate: bool
    animation_speed: float
    should_render_leg: bool
    stack_order: Optional[int] = None

    @property
    def mode(self) -> LayoutMode:
        return LayoutMode.CIRCLE if self.stack_order is None else LayoutMode.SPIRAL

    def to_dict(self) -> Dict[str, object]:
        """Return the record keyed the way map front-ends expect it."""

        payload: Dict[str, object] = {
            "index": self.index,
            "angle": self.angle,
            "legLength": self.leg_length,
            "x": self.x,
            "y": self.y,
            "transitionDelay": self.transition_delay,
            "animate": self.animate,
            "animationSpeed": self.animation_speed,
            "shouldRenderLeg": self.should_render_leg,
        }
        if self.stack_order is not None:
            payload["style"] = {"zIndex": self.stack_order}
        return payload


@dataclass(frozen=True)
class _Geometry:
    index: int
    angle: float
    leg_length: float
    x: float
    y: float
    transition_delay: float
    stack_order: Optional[int] = None


def select_mode(count: int, switchover: float) -> LayoutMode:
    """Spiral once ``count`` reaches ``switchover``; circle below it."""

    return LayoutMode.SPIRAL if count >= switchover else LayoutMode.CIRCLE


def resolve_position(
    leg_length: float, angle: float, params: LayoutParameters
) -> Tuple[float, float, float]:
    """Return ``(reported_leg_length, x, y)`` for a polar placement.

    The horizontal anchor offset is removed from the reported leg length but
    added into ``x``; the vertical offset only shifts ``y``.
    """

    x = leg_length * math.cos(angle) + params.anchor_offset_x
    y = leg_length * math.sin(angle) + params.anchor_offset_y
    return leg_length - params.anchor_offset_x, x, y


def transition_delay(index: int, count: int, animation_speed: float) -> float:
    """Entrance stagger in seconds; ``count`` must be positive."""

    return (animation_speed / 1000.0 / count) * index


def circle_radius(count: int, foot_separation: float) -> float:
    circumference = foot_separation * (count + CIRCLE_CIRCUMFERENCE_PAD)
    return circumference / TWO_PI


def _generate_circle(count: int, params: LayoutParameters) -> List[_Geometry]:
    radius = circle_radius(count, params.circle_foot_separation)
    angle_step = TWO_PI / count

    geometry: List[_Geometry] = []
    for index in range(count):
        angle = index * angle_step
        leg_length, x, y = resolve_position(radius, angle, params)
        geometry.append(
            _Geometry(
                index=index,
                angle=angle,
                leg_length=leg_length,
                x=x,
                y=y,
                transition_delay=transition_delay(index, count, params.animation_speed),
            )
        )
    return geometry


def _generate_spiral(count: int, params: LayoutParameters) -> List[_Geometry]:
    angle = 0.0
    leg = params.spiral_length_start

    geometry: List[_Geometry] = []
    for index in range(count):
        # angle is bumped before leg uses it, so the first division is never by 0
        angle += params.spiral_foot_separation / leg + index * SPIRAL_ANGLE_NUDGE
        leg += (TWO_PI * params.spiral_length_factor) / angle
        leg_length, x, y = resolve_position(leg, angle, params)
        geometry.append(
            _Geometry(
                index=index,
                angle=angle,
                leg_length=leg_length,
                x=x,
                y=y,
                transition_delay=transition_delay(index, count, params.animation_speed),
                stack_order=count - index,
            )
        )
    return geometry


def _assemble(geometry: List[_Geometry], count: int, params: LayoutParameters) -> Tuple[LayoutRecord, ...]:
    should_render_leg = count > 1 or params.force_legs_when_single
    return tuple(
        LayoutRecord(
            index=item.index,
            angle=item.angle,
            leg_length=item.leg_length,
            x=item.x,
            y=item.y,
            transition_delay=item.transition_delay,
            animate=params.animate,
            animation_speed=params.animation_speed,
            should_render_leg=should_render_leg,
            stack_order=item.stack_order,
        )
        for item in geometry
    )


@debug_log_call(logger)
def compute_layout(count: int, params: Optional[LayoutParameters] = None) -> Tuple[LayoutRecord, ...]:
    """Lay out ``count`` markers around the anchor.

    Returns one record per marker in marker order, or an empty tuple when
    ``count`` is zero. The result depends only on the arguments.
    """

    if count < 0:
        raise ValueError(f"marker count must be non-negative (got {count})")
    if count == 0:
        return ()

    params = params if params is not None else get_default_parameters()
    mode = select_mode(count, params.circle_spiral_switchover)
    if mode is LayoutMode.SPIRAL:
        geometry = _generate_spiral(count, params)
    else:
        geometry = _generate_circle(count, params)

    logger.debug("Laid out %d marker(s) in %s mode", count, mode.value)
    return _assemble(geometry, count, params)


__all__ = [
    "CIRCLE_CIRCUMFERENCE_PAD",
    "LayoutMode",
    "LayoutRecord",
    "SPIRAL_ANGLE_NUDGE",
    "TWO_PI",
    "circle_radius",
    "compute_layout",
    "resolve_position",
    "select_mode",
    "transition_delay",
]
