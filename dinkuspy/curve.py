"""
Curve module - A composite curve made of connected line, circle, arc and curve segments.
"""

import logging
import math
from typing import Iterator, Optional, Sequence, Tuple, Union

from .cad_types import P2, V2
from .constants import TOLERANCE
from .curve_like import CurveLike
from .primitives import A2, C2, L2, clamp

logger = logging.getLogger(__name__)


class Curve(CurveLike):
    """
    An ordered sequence of connected segments forming one parametrised whole.

    The curve parameter is divided into equal sub-ranges, one per segment,
    regardless of segment length: segment ``i`` of ``n`` owns ``[i/n, (i+1)/n)``.
    Physical length and parameter speed are therefore independent.

    Curves are immutable. ``line_to``, ``arc_to`` and ``append`` return new
    curves that share the unchanged segments with their predecessor.

    Example:
        >>> curve = Curve.create(L2(P2(0, 0), P2(1, 0))).arc_to(P2(2, 1)).line_to(P2(2, 3))
        >>> curve.count
        3
    """

    def __init__(self, segments: Sequence["Segment"]):
        """
        Initialize a curve from its segments.

        Args:
            segments: At least one line, circle, arc or curve, each starting
                where the previous one ends

        Raises:
            ValueError: If ``segments`` is empty or two neighbours do not meet
            TypeError: If a segment is not a curve-like object
        """
        segments = _check_segments(segments)
        for index in range(1, len(segments)):
            end = segments[index - 1].end_point
            start = segments[index].start_point
            if end.distance_to(start) > TOLERANCE:
                raise ValueError(
                    f"Cannot create curve: segment {index - 1} ends at {end} "
                    f"but segment {index} starts at {start}"
                )
        self._assign(segments)

    @classmethod
    def _from_segments(cls, segments: Sequence["Segment"]) -> "Curve":
        # Joints are exact by construction, or deliberately perturbed by rounding.
        curve = cls.__new__(cls)
        curve._assign(_check_segments(segments))
        return curve

    def _assign(self, segments: Tuple["Segment", ...]):
        self._segments = segments
        self._start_point = segments[0].point_at(0.0)
        self._end_point = segments[-1].point_at(1.0)
        self._closed = self._start_point.distance_to(self._end_point) < TOLERANCE

    @classmethod
    def create(cls, segment: Union[L2, C2, A2]) -> "Curve":
        """Create a curve consisting of a single line, circle or arc."""
        if not isinstance(segment, (L2, C2, A2)):
            raise TypeError(
                f"Cannot create curve from {type(segment).__name__}, "
                f"expected an L2, C2 or A2"
            )
        return cls((segment,))

    # ========== Properties ==========

    @property
    def segments(self) -> Tuple["Segment", ...]:
        return self._segments

    @property
    def count(self) -> int:
        """Number of segments."""
        return len(self._segments)

    @property
    def start_point(self) -> P2:
        return self._start_point

    @property
    def end_point(self) -> P2:
        return self._end_point

    @property
    def closed(self) -> bool:
        """Whether the end of the last segment meets the start of the first."""
        return self._closed

    @property
    def length(self) -> float:
        return sum(segment.length for segment in self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __getitem__(self, index: int) -> "Segment":
        return self._segments[index]

    def __iter__(self) -> Iterator["Segment"]:
        return iter(self._segments)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self):
        return hash(self._segments)

    # ========== Construction ==========

    def line_to(self, point: P2) -> "Curve":
        """
        Extend this curve with a straight line to ``point``.

        Returns this very curve if it is closed or already ends at ``point``.
        """
        if self._closed or point.distance_to(self._end_point) < TOLERANCE:
            return self
        return Curve._from_segments(self._segments + (L2(self._end_point, point),))

    def arc_to(self, point: P2) -> "Curve":
        """
        Extend this curve with an arc to ``point``, tangent to the last segment.

        Chains built with ``arc_to`` are tangent-continuous. When the arc would be
        flat because ``point`` lies straight ahead, a line is appended instead.
        Returns this very curve if it is closed or already ends at ``point``.
        """
        if self._closed or point.distance_to(self._end_point) < TOLERANCE:
            return self

        tangent = self._segments[-1].tangent_at(1.0)
        segment = A2.create(self._end_point, point, tangent)
        if segment.degenerate:
            logger.debug(f"Arc to {point} is flat, appending a line instead")
            segment = L2(self._end_point, point)
        return Curve._from_segments(self._segments + (segment,))

    def append(self, segment: "Segment") -> "Curve":
        """
        Append a segment or the segments of another curve to the end of this curve.

        A connecting line is inserted when the two do not meet. Returns this very
        curve if either side is closed.
        """
        if self._closed or segment.closed:
            return self

        segments = self._segments
        joint = segment.point_at(0.0)
        if self._end_point.distance_to(joint) > TOLERANCE:
            segments += (L2(self._end_point, joint),)

        if isinstance(segment, Curve):
            segments += segment.segments
        else:
            segments += (segment,)
        return Curve._from_segments(segments)

    # ========== Parametrisation ==========

    def segment_index(self, t: float) -> Tuple[int, float]:
        """
        Map a curve parameter to a segment index and segment parameter.

        Args:
            t: Curve parameter, clamped to [0, 1]

        Returns:
            Tuple[int, float]: Segment index and the parameter local to that segment
        """
        count = self.count
        if t <= 0.0:
            return 0, 0.0
        if t >= 1.0:
            return count - 1, 1.0

        t *= count
        index = int(t)
        if index >= count:
            return count - 1, 1.0
        return index, t - index

    def curve_parameter(self, index: int, t: float) -> float:
        """Map a segment index and segment parameter back to a curve parameter."""
        return clamp((index + t) / self.count, 0.0, 1.0)

    def point_at(self, t: float) -> P2:
        index, local = self.segment_index(t)
        return self._segments[index].point_at(local)

    def tangent_at(self, t: float) -> V2:
        index, local = self.segment_index(t)
        return self._segments[index].tangent_at(local)

    def parameter_near(self, point: P2) -> float:
        """
        Find the curve parameter nearest to ``point``.

        Every segment proposes its own nearest parameter, the segment whose
        proposal lies closest to ``point`` wins.
        """
        best_distance = math.inf
        best_index = -1
        best_t = math.nan

        for index, segment in enumerate(self._segments):
            local = segment.parameter_near(point)
            distance = segment.point_at(local).distance_to(point)
            if distance < best_distance:
                best_distance = distance
                best_index = index
                best_t = local

        if best_index < 0 or math.isnan(best_t):
            return math.nan
        return self.curve_parameter(best_index, best_t)

    def distance_to(self, point: P2) -> float:
        return min(segment.distance_to(point) for segment in self._segments)

    # ========== Formatting ==========

    def round(self, decimals: int = 0) -> "Curve":
        return Curve._from_segments(tuple(segment.round(decimals) for segment in self._segments))

    def to_string(self, template: Optional[str] = None) -> str:
        """Format every segment, one per line, with ``template`` or each segment's default."""
        if template is None:
            return "\n".join(segment.to_string() for segment in self._segments)
        return "\n".join(segment.to_string(template) for segment in self._segments)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Curve(count={self.count}, closed={self.closed}, length={self.length:.4f})"


def _check_segments(segments: Sequence["Segment"]) -> Tuple["Segment", ...]:
    segments = tuple(segments)
    if not segments:
        raise ValueError("Cannot create curve: no segments provided")
    for index, segment in enumerate(segments):
        if not isinstance(segment, CurveLike):
            raise TypeError(
                f"Curve segment {index} must be an L2, C2, A2 or Curve, "
                f"got {type(segment).__name__}"
            )
    return segments


Segment = Union[L2, C2, A2, Curve]
