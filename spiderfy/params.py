"""Layout parameters, defaults and host-mapping coercion."""

from __future__ import annotations

import copy
import logging
import math
import numbers
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


class ParameterError(ValueError):
    pass


@dataclass(frozen=True)
class LayoutParameters:
    """Shape and spacing knobs for one layout computation.

    Numeric fields are expected to be finite and strictly positive (offsets may
    be any finite value). Nothing here enforces that: a negative or non-finite
    value flows through the arithmetic and may surface as NaN/inf in the
    records, which the host must guard against before rendering.
    """

    circle_foot_separation: float = 90.0
    # 0 -> always spiral, math.inf -> always circle
    circle_spiral_switchover: float = 9
    spiral_foot_separation: float = 80.0
    spiral_length_start: float = 60.0
    spiral_length_factor: float = 5.0
    animate: bool = True
    animation_speed: float = 500.0  # ms
    anchor_offset_x: float = 0.0
    anchor_offset_y: float = 0.0
    force_legs_when_single: bool = False

    def with_overrides(self, **overrides: Any) -> "LayoutParameters":
        return replace(self, **overrides)


_DEFAULT_PARAMETERS = LayoutParameters()


def get_default_parameters() -> LayoutParameters:
    return copy.deepcopy(_DEFAULT_PARAMETERS)


def set_default_parameters(params: LayoutParameters) -> None:
    global _DEFAULT_PARAMETERS
    _DEFAULT_PARAMETERS = copy.deepcopy(params)


# Property names used by the map component this layout was lifted from.
PARAMETER_ALIASES: Dict[str, str] = {
    "circleFootSeparation": "circle_foot_separation",
    "circleSpiralSwitchover": "circle_spiral_switchover",
    "spiralFootSeparation": "spiral_foot_separation",
    "spiralLengthStart": "spiral_length_start",
    "spiralLengthFactor": "spiral_length_factor",
    "animate": "animate",
    "animationSpeed": "animation_speed",
    "transformSpiderLeft": "anchor_offset_x",
    "transformSpiderTop": "anchor_offset_y",
    "anchorOffsetX": "anchor_offset_x",
    "anchorOffsetY": "anchor_offset_y",
    "showingLegs": "force_legs_when_single",
    "forceLegsWhenSingle": "force_legs_when_single",
}

_BOOL_FIELDS = {"animate", "force_legs_when_single"}
_FIELD_NAMES = {f.name for f in fields(LayoutParameters)}


def _coerce_bool(key: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "1", "on"):
            return True
        if lowered in ("false", "no", "0", "off"):
            return False
    raise ParameterError(f'parameter "{key}" must be boolean (got {value!r})')


def _coerce_number(key: str, value: object) -> float:
    if isinstance(value, bool):
        raise ParameterError(f'parameter "{key}" must be numeric (got {value!r})')
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("inf", "infinity", "+inf"):
            return math.inf
        try:
            return float(text)
        except ValueError as exc:
            raise ParameterError(f'parameter "{key}" must be numeric (got {value!r})') from exc
    raise ParameterError(f'parameter "{key}" must be numeric (got {value!r})')


def parameters_from_mapping(
    values: Mapping[str, object],
    base: Optional[LayoutParameters] = None,
) -> LayoutParameters:
    """Build parameters from a host mapping, falling back to ``base`` or the defaults.

    Keys may be field names or any name in :data:`PARAMETER_ALIASES`.
    """

    params = base if base is not None else get_default_parameters()
    overrides: Dict[str, Any] = {}
    for key, value in values.items():
        name = key if key in _FIELD_NAMES else PARAMETER_ALIASES.get(key)
        if name is None:
            raise ParameterError(f'unknown layout parameter "{key}"')
        if value is None:
            continue
        if name in _BOOL_FIELDS:
            overrides[name] = _coerce_bool(key, value)
        else:
            overrides[name] = _coerce_number(key, value)

    if overrides:
        logger.debug("Applying %d parameter override(s): %s", len(overrides), sorted(overrides))
    return params.with_overrides(**overrides)


__all__ = [
    "LayoutParameters",
    "ParameterError",
    "PARAMETER_ALIASES",
    "get_default_parameters",
    "set_default_parameters",
    "parameters_from_mapping",
]
