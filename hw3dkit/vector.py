"""Two- and three-dimensional geometric vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


def _fmt(value: Number) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:f}"


@dataclass(frozen=True, slots=True, eq=False)
class Vec2:
    """A 2D vector with element-wise arithmetic."""

    x: Number = 0
    y: Number = 0

    def _combine(self, other, op) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(op(self.x, other.x), op(self.y, other.y))
        if isinstance(other, (int, float)):
            return Vec2(op(self.x, other), op(self.y, other))
        return NotImplemented

    def _rcombine(self, other, op) -> Vec2:
        if isinstance(other, (int, float)):
            return Vec2(op(other, self.x), op(other, self.y))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._rcombine(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return self._rcombine(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._rcombine(other, lambda a, b: a * b)

    def __truediv__(self, other):
        return self._combine(other, lambda a, b: a / b)

    def __rtruediv__(self, other):
        return self._rcombine(other, lambda a, b: a / b)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __pos__(self) -> Vec2:
        return Vec2(+self.x, +self.y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __lt__(self, other: Vec2) -> bool:
        return (self.y, self.x) < (other.y, other.x)

    def __gt__(self, other: Vec2) -> bool:
        return (self.y, self.x) > (other.y, other.x)

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({_fmt(self.x)},{_fmt(self.y)})"

    def mag(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def mag2(self) -> Number:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def norm(self) -> Vec2:
        """Unit vector in the same direction."""
        r = 1.0 / self.mag()
        return Vec2(self.x * r, self.y * r)

    def floor(self) -> Vec2:
        return Vec2(math.floor(self.x), math.floor(self.y))

    def ceil(self) -> Vec2:
        return Vec2(math.ceil(self.x), math.ceil(self.y))

    def max(self, other: Vec2) -> Vec2:
        return Vec2(max(self.x, other.x), max(self.y, other.y))

    def min(self, other: Vec2) -> Vec2:
        return Vec2(min(self.x, other.x), min(self.y, other.y))

    def clamp(self, low: Vec2, high: Vec2) -> Vec2:
        """Clamp each component between ``low`` and ``high``."""
        return self.max(low).min(high)

    def dot(self, other: Vec2) -> Number:
        return self.x * other.x + self.y * other.y

    def truncated(self) -> Vec2:
        """Integer vector, each component truncated toward zero."""
        return Vec2(int(self.x), int(self.y))


@dataclass(frozen=True, slots=True, eq=False)
class Vec3:
    """A 3D vector with an optional homogeneous ``w`` component."""

    x: Number = 0
    y: Number = 0
    z: Number = 0
    w: Number = 1

    def _combine(self, other, op) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, (int, float)):
            return Vec3(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def _rcombine(self, other, op) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(op(other, self.x), op(other, self.y), op(other, self.z))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._rcombine(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return self._rcombine(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._rcombine(other, lambda a, b: a * b)

    def __truediv__(self, other):
        return self._combine(other, lambda a, b: a / b)

    def __rtruediv__(self, other):
        return self._rcombine(other, lambda a, b: a / b)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __pos__(self) -> Vec3:
        return Vec3(+self.x, +self.y, +self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __lt__(self, other: Vec3) -> bool:
        return (self.z, self.y, self.x) < (other.z, other.y, other.x)

    def __gt__(self, other: Vec3) -> bool:
        return (self.z, self.y, self.x) > (other.z, other.y, other.x)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({_fmt(self.x)},{_fmt(self.y)},{_fmt(self.z)})"

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def xz(self) -> Vec2:
        return Vec2(self.x, self.z)

    def zw(self) -> Vec2:
        return Vec2(self.z, self.w)

    def volume(self) -> Number:
        """Volume of the cuboid spanned by the components."""
        return self.x * self.y * self.z

    def mag(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def mag2(self) -> Number:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> Vec3:
        r = 1.0 / self.mag()
        return Vec3(self.x * r, self.y * r, self.z * r)

    def floor(self) -> Vec3:
        return Vec3(math.floor(self.x), math.floor(self.y), math.floor(self.z), self.w)

    def ceil(self) -> Vec3:
        return Vec3(math.ceil(self.x), math.ceil(self.y), math.ceil(self.z), self.w)

    def max(self, other: Vec3) -> Vec3:
        return Vec3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def min(self, other: Vec3) -> Vec3:
        return Vec3(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def dot(self, other: Vec3) -> Number:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def clamp(self, low: Vec3, high: Vec3) -> Vec3:
        return self.max(low).min(high)

    def lerp(self, other: Vec3, t: float) -> Vec3:
        """Linear interpolation towards ``other`` by parameter ``t``."""
        return self * (1.0 - t) + other * t

    def as_array(self) -> tuple[Number, Number, Number, Number]:
        """The components as an ``(x, y, z, w)`` tuple."""
        return (self.x, self.y, self.z, self.w)

    def with_w(self, w: Number) -> Vec3:
        """A copy with the ``w`` component replaced."""
        return Vec3(self.x, self.y, self.z, w)