import math
import numbers
from dataclasses import dataclass

from .constants import NORMALIZE_TOLERANCE


@dataclass(frozen=True)
class V2:
    """A free 2D vector. Has a direction and a length but no position."""

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_angle(cls, angle: float) -> "V2":
        """Create a unit vector pointing at ``angle`` degrees from the x axis."""
        radians = math.radians(angle)
        return cls(math.cos(radians), math.sin(radians))

    # ========== Arithmetic ==========

    def __pos__(self) -> "V2":
        return self

    def __neg__(self) -> "V2":
        return V2(-self.x, -self.y)

    def __add__(self, other):
        if isinstance(other, V2):
            return V2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, V2):
            return V2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return V2(self.x * scalar, self.y * scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return V2(self.x / scalar, self.y / scalar)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, V2):
            return self.dot(other)
        return NotImplemented

    def dot(self, other: "V2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "V2") -> float:
        """Z component of the 3D cross product, positive when ``other`` is anti-clockwise of this vector."""
        return self.x * other.y - self.y * other.x

    # ========== Properties ==========

    @property
    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    @property
    def angle(self) -> float:
        """Angle of this vector in degrees, in the (-180, 180] range."""
        return math.degrees(math.atan2(self.y, self.x))

    def normalize(self) -> "V2":
        """
        Create a unit vector pointing in the same direction.

        Zero-length vectors cannot be normalised and unit-length vectors need
        not be, both are returned unchanged.
        """
        length = self.length
        if min(abs(length), abs(length - 1.0)) < NORMALIZE_TOLERANCE:
            return self
        return V2(self.x / length, self.y / length)

    def rotate(self, angle: float) -> "V2":
        """
        Rotate this vector anti-clockwise.

        Args:
            angle: Rotation angle in degrees

        Returns:
            V2: A vector of the same length
        """
        length = self.length
        radians = math.radians(self.angle + angle)
        return V2(length * math.cos(radians), length * math.sin(radians))

    def perpendicular(self) -> "V2":
        """This vector turned a quarter anti-clockwise, without trigonometry."""
        return V2(-self.y, self.x)

    def round(self, decimals: int = 0) -> "V2":
        return V2(round(self.x, decimals), round(self.y, decimals))

    def to_string(self, template: str = "[{0:.4f} {1:.4f}]") -> str:
        """Format this vector. ``{0}`` and ``{1}`` place the x and y values."""
        return template.format(self.x, self.y)

    def __str__(self):
        return self.to_string()


@dataclass(frozen=True)
class P2:
    """An affine 2D point."""

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __add__(self, other):
        # Both a motion along a vector and a component-wise sum of points,
        # the latter for affine combinations such as 0.5 * a + 0.5 * b.
        if isinstance(other, (V2, P2)):
            return P2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, V2):
            return P2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, P2):
            return V2(self.x - other.x, self.y - other.y)
        if isinstance(other, V2):
            return P2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return P2(self.x * scalar, self.y * scalar)
        return NotImplemented

    __rmul__ = __mul__

    def distance_to(self, other: "P2") -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return math.sqrt(dx * dx + dy * dy)

    def round(self, decimals: int = 0) -> "P2":
        return P2(round(self.x, decimals), round(self.y, decimals))

    def to_string(self, template: str = "({0:.4f} {1:.4f})") -> str:
        """Format this point. ``{0}`` and ``{1}`` place the x and y values."""
        return template.format(self.x, self.y)

    def __str__(self):
        return self.to_string()


V2.ZERO = V2(0.0, 0.0)
V2.UNIT_X = V2(1.0, 0.0)
V2.UNIT_Y = V2(0.0, 1.0)
P2.ORIGIN = P2(0.0, 0.0)
