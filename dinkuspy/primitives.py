"""
2D Geometric primitives: line segments, circles and circular arcs.

All primitives are immutable values. Angles are in degrees.
"""

import logging
import math
from dataclasses import dataclass

from .cad_types import P2, V2
from .constants import (
    FULL_TURN,
    MAX_SWEEP,
    MIN_SWEEP,
    QUARTER_TURN_POINTS,
    QUARTER_TURN_TANGENTS,
    TANGENT_TOLERANCE,
    TOLERANCE,
    TWO_PI,
)
from .curve_like import CurveLike

logger = logging.getLogger(__name__)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def wrap_degrees(angle: float) -> float:
    """Wrap an angle into the [0, 360) range."""
    angle %= FULL_TURN
    # -1e-17 % 360 rounds up to exactly 360
    if angle >= FULL_TURN:
        angle -= FULL_TURN
    return angle


@dataclass(frozen=True)
class L2(CurveLike):
    """A finite 2D line segment from ``a`` to ``b``, parametrised linearly over [0, 1]."""

    a: P2
    b: P2

    def parameter_near(self, point: P2) -> float:
        span = self.span
        quadrance = span.dot(span)
        if quadrance == 0.0:
            return 0.0

        t = (point - self.a).dot(span) / quadrance
        return clamp(t, 0.0, 1.0)

    def point_at(self, t: float) -> P2:
        return P2(
            (1 - t) * self.a.x + t * self.b.x,
            (1 - t) * self.a.y + t * self.b.y,
        )

    def tangent_at(self, t: float) -> V2:
        return self.tangent

    def distance_to(self, point: P2) -> float:
        return point.distance_to(self.point_at(self.parameter_near(point)))

    @property
    def span(self) -> V2:
        return self.b - self.a

    @property
    def tangent(self) -> V2:
        return self.span.normalize()

    @property
    def length(self) -> float:
        return self.a.distance_to(self.b)

    @property
    def closed(self) -> bool:
        return False

    def round(self, decimals: int = 0) -> "L2":
        return L2(self.a.round(decimals), self.b.round(decimals))

    def to_string(
        self, template: str = "({0:.4f} {1:.4f}, {2:.4f} {3:.4f})"
    ) -> str:
        """Format this line. Placeholders: a.x={0}, a.y={1}, b.x={2}, b.y={3}."""
        return template.format(self.a.x, self.a.y, self.b.x, self.b.y)

    def __str__(self):
        return self.to_string()


@dataclass(frozen=True)
class C2(CurveLike):
    """
    A 2D circle with centre ``m`` and radius ``r``.

    Circles are always closed. Parameter ``t`` maps to the angle ``2πt``
    measured anti-clockwise from the positive x axis.
    """

    m: P2
    r: float

    def __post_init__(self):
        object.__setattr__(self, "r", float(self.r))

    def parameter_near(self, point: P2) -> float:
        dx = point.x - self.m.x
        dy = point.y - self.m.y
        t = math.atan2(dy, dx) / TWO_PI
        if t < 0.0:
            t += 1.0
        if t >= 1.0:
            t = 0.0
        return t

    def point_at(self, t: float) -> P2:
        t %= 1.0
        if t in QUARTER_TURN_POINTS:
            ux, uy = QUARTER_TURN_POINTS[t]
        else:
            ux, uy = math.cos(TWO_PI * t), math.sin(TWO_PI * t)
        return P2(self.m.x + self.r * ux, self.m.y + self.r * uy)

    def tangent_at(self, t: float) -> V2:
        t %= 1.0
        if t in QUARTER_TURN_TANGENTS:
            return V2(*QUARTER_TURN_TANGENTS[t])
        return V2(-math.sin(TWO_PI * t), math.cos(TWO_PI * t))

    def distance_to(self, point: P2) -> float:
        return abs(self.m.distance_to(point) - self.r)

    def contains(self, point: P2) -> bool:
        """Whether ``point`` lies inside or on the circle."""
        return self.m.distance_to(point) <= self.r

    @property
    def length(self) -> float:
        return TWO_PI * self.r

    @property
    def closed(self) -> bool:
        return True

    def round(self, decimals: int = 0) -> "C2":
        return C2(self.m.round(decimals), round(self.r, decimals))

    def to_string(self, template: str = "({0:.4f} {1:.4f}, R:{2:.4f})") -> str:
        """Format this circle. Placeholders: m.x={0}, m.y={1}, r={2}."""
        return template.format(self.m.x, self.m.y, self.r)

    def __str__(self):
        return self.to_string()


@dataclass(frozen=True)
class A2(CurveLike):
    """
    A 2D circular arc.

    Args:
        m: Arc centre
        r: Arc radius
        a: Start angle in degrees
        s: Signed sweep angle in degrees, positive anti-clockwise. Only the
            [-360, 360] range is ever used, larger sweeps are clamped.

    Parameter ``t`` maps to the angle ``a + t * sweep``. The arc is closed when
    it sweeps a full turn.
    """

    m: P2
    r: float
    a: float
    s: float

    def __post_init__(self):
        object.__setattr__(self, "r", float(self.r))
        object.__setattr__(self, "a", float(self.a))
        object.__setattr__(self, "s", float(self.s))

    @classmethod
    def create(cls, start: P2, end: P2, tangent: V2) -> "A2":
        """
        Construct the circular arc from ``start`` to ``end`` that leaves ``start``
        in the direction of ``tangent``.

        Degenerate input (coincident points, or a tangent parallel to the chord)
        yields a zero-radius, zero-sweep arc centred at ``start``.

        Args:
            start: Start point of the arc
            end: End point of the arc
            tangent: Direction of the arc at ``start``, need not be normalised

        Returns:
            A2: The arc whose derivative at parameter 0 matches ``tangent``
        """
        from .intersections import are_parallel, line_line

        chord = end - start
        if chord.length < TOLERANCE:
            logger.debug(f"Arc from {start} to {end} has no chord, returning a point arc")
            return cls(start, 0.0, 0.0, 0.0)

        tangent = tangent.normalize()
        if abs(tangent.cross(chord.normalize())) < TANGENT_TOLERANCE:
            logger.debug(f"Tangent {tangent} runs along the chord from {start} to {end}, arc is flat")
            return cls(start, 0.0, 0.0, 0.0)

        # The centre lies on the normal at start and on the chord's perpendicular bisector.
        radial_line = L2(start, start + tangent.perpendicular())
        middle = start + chord * 0.5
        bisector = L2(middle, middle + chord.perpendicular())
        if are_parallel(radial_line, bisector):
            logger.debug(f"Could not locate a centre for the arc from {start} to {end}")
            return cls(start, 0.0, 0.0, 0.0)

        t1, _ = line_line(radial_line, bisector)
        centre = radial_line.point_at(t1)
        radial = start - centre
        start_angle = radial.angle
        end_angle = (end - centre).angle

        sweep = wrap_degrees(end_angle - start_angle)
        if sweep > 180.0:
            sweep -= FULL_TURN

        # Flip to the long way round when the tangent winds against the short sweep.
        winding = radial.cross(tangent)
        if winding > 0.0 and sweep < 0.0:
            sweep += FULL_TURN
        elif winding < 0.0 and sweep > 0.0:
            sweep -= FULL_TURN

        return cls(centre, centre.distance_to(start), start_angle, sweep)

    @property
    def sweep(self) -> float:
        """The signed sweep angle clamped to [-360, 360]."""
        return clamp(self.s, MIN_SWEEP, MAX_SWEEP)

    @property
    def e(self) -> float:
        """End angle of the arc in degrees."""
        return self.a + self.sweep

    @property
    def degenerate(self) -> bool:
        return self.sweep == 0.0 or self.r == 0.0

    def parameter_near(self, point: P2) -> float:
        """
        Parameter of the point on the arc nearest to ``point``.

        Points whose angle falls outside the swept span snap to whichever end
        of the arc is nearer in Euclidean distance.
        """
        sweep = self.sweep
        span = abs(sweep)
        if span == 0.0:
            return 0.0

        angle = math.degrees(math.atan2(point.y - self.m.y, point.x - self.m.x))
        relative = wrap_degrees(angle - self.a)
        if sweep < 0.0:
            relative = wrap_degrees(-relative)

        if relative <= span:
            return relative / span

        if point.distance_to(self.point_at(0.0)) <= point.distance_to(self.point_at(1.0)):
            return 0.0
        return 1.0

    def point_at(self, t: float) -> P2:
        radians = math.radians(self.a + t * self.sweep)
        return P2(
            self.m.x + self.r * math.cos(radians),
            self.m.y + self.r * math.sin(radians),
        )

    def tangent_at(self, t: float) -> V2:
        radians = math.radians(self.a + t * self.sweep)
        sign = -1.0 if self.sweep < 0.0 else 1.0
        return V2(-math.sin(radians) * sign, math.cos(radians) * sign)

    def distance_to(self, point: P2) -> float:
        return point.distance_to(self.point_at(self.parameter_near(point)))

    @property
    def length(self) -> float:
        return self.r * abs(math.radians(self.sweep))

    @property
    def closed(self) -> bool:
        return abs(self.s) >= FULL_TURN

    def round(self, decimals: int = 0) -> "A2":
        return A2(
            self.m.round(decimals),
            round(self.r, decimals),
            round(self.a, decimals),
            round(self.s, decimals),
        )

    def to_string(
        self, template: str = "({0:.4f} {1:.4f}, r:{2:.4f}, a:{3:.4f}, s:{4:.4f})"
    ) -> str:
        """Format this arc. Placeholders: m.x={0}, m.y={1}, r={2}, a={3}, sweep={4}."""
        return template.format(self.m.x, self.m.y, self.r, self.a, self.sweep)

    def __str__(self):
        return self.to_string()
