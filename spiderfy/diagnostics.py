"""Numeric summaries of a computed layout."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial.distance import pdist

from .layout import LayoutMode, LayoutRecord

logger = logging.getLogger(__name__)

BoundingBox = Tuple[float, float, float, float]


@dataclass
class LayoutSummary:
    count: int
    mode: Optional[LayoutMode]
    min_leg_length: float
    max_leg_length: float
    min_separation: float
    bounding_box: Optional[BoundingBox]


def positions_array(records: Sequence[LayoutRecord]) -> np.ndarray:
    """Return marker offsets as an ``(n, 2)`` float array."""

    if not records:
        return np.zeros((0, 2), dtype=float)
    return np.array([(record.x, record.y) for record in records], dtype=float)


def bounding_box(records: Sequence[LayoutRecord]) -> BoundingBox:
    if not records:
        raise ValueError("bounding_box requires at least one record")
    pts = positions_array(records)
    min_x, min_y = pts.min(axis=0)
    max_x, max_y = pts.max(axis=0)
    return float(min_x), float(min_y), float(max_x), float(max_y)


def min_separation(records: Sequence[LayoutRecord]) -> float:
    """Smallest distance between any two markers; ``inf`` below two markers."""

    if len(records) < 2:
        return math.inf
    return float(pdist(positions_array(records)).min())


def normalize_positions(
    records: Sequence[LayoutRecord], scale: float = 100.0
) -> List[Tuple[float, float]]:
    """Map marker offsets into ``[0, scale]`` on each axis, in record order."""

    if not records:
        return []
    pts = positions_array(records)
    mins = pts.min(axis=0)
    spans = pts.max(axis=0) - mins
    safe = np.where(spans == 0, 1.0, spans)
    normalized = np.where(spans == 0, 0.0, (pts - mins) / safe) * scale

    logger.info("Normalized %d marker position(s) with scale=%s", len(records), scale)
    return [(float(x), float(y)) for x, y in normalized]


def summarize(records: Sequence[LayoutRecord]) -> LayoutSummary:
    if not records:
        return LayoutSummary(
            count=0,
            mode=None,
            min_leg_length=0.0,
            max_leg_length=0.0,
            min_separation=math.inf,
            bounding_box=None,
        )
    legs = np.array([record.leg_length for record in records], dtype=float)
    return LayoutSummary(
        count=len(records),
        mode=records[0].mode,
        min_leg_length=float(legs.min()),
        max_leg_length=float(legs.max()),
        min_separation=min_separation(records),
        bounding_box=bounding_box(records),
    )


__all__ = [
    "BoundingBox",
    "LayoutSummary",
    "bounding_box",
    "min_separation",
    "normalize_positions",
    "positions_array",
    "summarize",
]
