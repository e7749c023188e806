"""Numeric segment manipulation for range expansion.

Range constraints (``~1.2``, ``1.0.*``) are expanded into bounds by padding
and incrementing the four numeric segments of a version.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

SEGMENT_COUNT = 4


def manipulate_version_string(
    segments: Sequence[Optional[str]],
    position: int,
    increment: int = 0,
    pad: str = "0",
) -> Optional[str]:
    """Increment, decrement, or simply pad a version number.

    Every segment after ``position`` is replaced by ``pad``. When
    ``increment`` is non-zero it is added to the segment at ``position``;
    a negative result is replaced by ``pad`` and the decrement is carried
    into the segment on its left.

    Args:
        segments: The four version segments, most significant first.
            Absent segments may be ``None`` or empty.
        position: 1-based segment to increment; segments after it are padded.
        increment: Amount added to the segment at ``position``.
        pad: Value written into padded segments.

    Returns:
        The four segments joined with ``.``, or ``None`` when a carry runs
        past the first segment and no version can represent the result.

    Example::

        >>> manipulate_version_string(["1", "2", None, None], 1, 1)
        '2.0.0.0'
        >>> manipulate_version_string(["0", "0", "0", "0"], 1, -1) is None
        True
    """
    if len(segments) != SEGMENT_COUNT:
        raise ValueError(
            f"Expected {SEGMENT_COUNT} version segments, got {len(segments)}"
        )

    parts: List[str] = [segment or "" for segment in segments]

    for i in range(SEGMENT_COUNT, 0, -1):
        if i > position:
            parts[i - 1] = pad
        elif i == position and increment:
            value = int(parts[i - 1] or 0) + increment
            if value < 0:
                # Carry the decrement into the next significant segment
                parts[i - 1] = pad
                position -= 1

                if i == 1:
                    return None
            else:
                parts[i - 1] = str(value)

    return ".".join(parts)
