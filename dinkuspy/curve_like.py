"""
CurveLike module - The capability contract shared by every curve kind.
"""

from abc import ABC, abstractmethod

from .cad_types import P2, V2


class CurveLike(ABC):
    """
    Abstract base class for everything that can be evaluated as a parametric curve.

    Lines, circles, arcs and composite curves all implement this contract so
    callers can query them uniformly. Parameters are normalised to [0, 1]
    ([0, 1) for circles), increasing from the start of the curve to its end.
    """

    @property
    @abstractmethod
    def length(self) -> float:
        """Total length of the curve."""
        ...

    @property
    @abstractmethod
    def closed(self) -> bool:
        """Whether the start and end of the curve coincide."""
        ...

    @abstractmethod
    def point_at(self, t: float) -> P2:
        """
        Evaluate the curve at a parameter.

        Args:
            t: Curve parameter. Values outside [0, 1] extrapolate lines and arcs,
                wrap around circles and clamp to the ends of composite curves.

        Returns:
            P2: The point at ``t``
        """
        ...

    @abstractmethod
    def tangent_at(self, t: float) -> V2:
        """Unit tangent at a parameter, pointing towards increasing ``t``."""
        ...

    @abstractmethod
    def distance_to(self, point: P2) -> float:
        """Euclidean distance from ``point`` to the nearest point on the curve."""
        ...

    @abstractmethod
    def parameter_near(self, point: P2) -> float:
        """Parameter of the point on the curve nearest to ``point``."""
        ...

    @property
    def start_point(self) -> P2:
        return self.point_at(0.0)

    @property
    def end_point(self) -> P2:
        return self.point_at(1.0)
