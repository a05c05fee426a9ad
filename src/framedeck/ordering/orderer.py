"""
Module: ordering.orderer

Purpose:
    Turn an unordered set of frames into a deterministic slide deck.

Key Functions:
    - order_frames(): Order frames spatially or by a custom id order
    - build_deck(): Collect frames from scene elements and order them

Algorithm:
    Custom order (non-empty):
    1. Rank each frame by its position in the custom order (unlisted = inf)
    2. Sort by (rank, y, x)

    Spatial order:
    1. Stable sort by y
    2. One linear pass grouping frames into rows; a frame joins the current
       row when its y is within row_threshold of the row's first frame
    3. Sort each row by x and concatenate rows in formation order

Dependencies:
    - core.models.frames: Frame
    - common.thresholds: ROW_THRESHOLD

Used By:
    - export.pipeline
    - presentation.controller
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from framedeck.common.thresholds import ROW_THRESHOLD
from framedeck.core.models.frames import Frame, collect_frames

logger = logging.getLogger(__name__)


def order_frames(
    frames: Iterable[Frame],
    custom_order: Optional[Sequence[str]] = None,
    *,
    row_threshold: float = ROW_THRESHOLD,
) -> List[Frame]:
    """
    Order frames into a deck.

    Args:
        frames: Frames to order (any iteration order)
        custom_order: Optional user-authored sequence of frame ids
        row_threshold: Max vertical distance from a row's anchor y for a
            frame to join that row (spatial mode only)

    Returns:
        New list containing every input frame exactly once

    Example:
        >>> a = Frame("a", x=500, y=10, width=100, height=100)
        >>> b = Frame("b", x=0, y=40, width=100, height=100)
        >>> [f.id for f in order_frames([a, b])]
        ['b', 'a']
    """
    frames = list(frames)
    if not frames:
        return []

    if custom_order:
        return _order_by_custom(frames, custom_order)

    return _order_spatially(frames, row_threshold)


def _order_by_custom(frames: List[Frame], custom_order: Sequence[str]) -> List[Frame]:
    """Sort by custom rank; unlisted frames trail in (y, x) order."""
    rank = {}
    for i, frame_id in enumerate(custom_order):
        # First occurrence wins if an id is listed twice
        rank.setdefault(frame_id, i)

    unknown = [f.id for f in frames if f.id not in rank]
    if unknown:
        logger.debug(f"{len(unknown)} frames missing from custom order, appending spatially")

    return sorted(frames, key=lambda f: (rank.get(f.id, math.inf), f.y, f.x))


def _order_spatially(frames: List[Frame], row_threshold: float) -> List[Frame]:
    """Group frames into rows by y, then order each row by x."""
    by_y = sorted(frames, key=lambda f: f.y)

    rows: List[List[Frame]] = []
    anchor_y = 0.0
    for frame in by_y:
        if rows and abs(frame.y - anchor_y) <= row_threshold:
            rows[-1].append(frame)
        else:
            rows.append([frame])
            anchor_y = frame.y

    ordered: List[Frame] = []
    for row in rows:
        ordered.extend(sorted(row, key=lambda f: f.x))

    logger.debug(f"Ordered {len(ordered)} frames into {len(rows)} rows")
    return ordered


def build_deck(
    elements: Iterable[Mapping[str, Any]],
    custom_order: Optional[Sequence[str]] = None,
) -> List[Frame]:
    """
    Collect frames from scene elements and order them.

    Args:
        elements: Scene elements
        custom_order: Optional custom id order

    Returns:
        Ordered deck of frames
    """
    return order_frames(collect_frames(elements), custom_order)
