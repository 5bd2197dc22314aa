"""Core math types, components and resources shared by the game systems."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, List, Optional

_EPSILON = 1.1920929e-07


@dataclass(frozen=True)
class Vec2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vec2"]

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize_or_zero(self) -> "Vec2":
        """Return the unit vector in this direction, or zero if that is not finite."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return Vec2.ZERO
        return Vec2(self.x / length, self.y / length)


Vec2.ZERO = Vec2(0.0, 0.0)


@dataclass(frozen=True)
class Vec3:
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar["Vec3"]
    X: ClassVar["Vec3"]
    Y: ClassVar["Vec3"]
    Z: ClassVar["Vec3"]

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vec3":
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec3":
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_squared(self, other: "Vec3") -> float:
        return (self - other).length_squared()

    def normalize_or_zero(self) -> "Vec3":
        """Return the unit vector in this direction, or zero if that is not finite."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return Vec3.ZERO
        return self / length

    def lerp(self, other: "Vec3", t: float) -> "Vec3":
        """Linear interpolation; ``t`` is not clamped."""
        return self + (other - self) * t

    def xz(self) -> Vec2:
        return Vec2(self.x, self.z)

    def _any_orthonormal(self) -> "Vec3":
        sign = math.copysign(1.0, self.z)
        a = -1.0 / (sign + self.z)
        b = self.x * self.y * a
        return Vec3(b, sign + self.y * self.y * a, -self.y)


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion stored as (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    IDENTITY: ClassVar["Quat"]

    @classmethod
    def from_rotation_y(cls, angle: float) -> "Quat":
        half = angle * 0.5
        return cls(0.0, math.sin(half), 0.0, math.cos(half))

    @classmethod
    def _from_axes(cls, x_axis: Vec3, y_axis: Vec3, z_axis: Vec3) -> "Quat":
        m00, m01, m02 = x_axis.x, x_axis.y, x_axis.z
        m10, m11, m12 = y_axis.x, y_axis.y, y_axis.z
        m20, m21, m22 = z_axis.x, z_axis.y, z_axis.z
        if m22 <= 0.0:
            dif10 = m11 - m00
            omm22 = 1.0 - m22
            if dif10 <= 0.0:
                four_xsq = omm22 - dif10
                inv = 0.5 / math.sqrt(four_xsq)
                return cls(four_xsq * inv, (m01 + m10) * inv, (m02 + m20) * inv, (m12 - m21) * inv)
            four_ysq = omm22 + dif10
            inv = 0.5 / math.sqrt(four_ysq)
            return cls((m01 + m10) * inv, four_ysq * inv, (m12 + m21) * inv, (m20 - m02) * inv)
        sum10 = m11 + m00
        opm22 = 1.0 + m22
        if sum10 <= 0.0:
            four_zsq = opm22 - sum10
            inv = 0.5 / math.sqrt(four_zsq)
            return cls((m02 + m20) * inv, (m12 + m21) * inv, four_zsq * inv, (m01 - m10) * inv)
        four_wsq = opm22 + sum10
        inv = 0.5 / math.sqrt(four_wsq)
        return cls((m12 - m21) * inv, (m20 - m02) * inv, (m01 - m10) * inv, four_wsq * inv)

    def __neg__(self) -> "Quat":
        return Quat(-self.x, -self.y, -self.z, -self.w)

    def _scaled(self, s: float) -> "Quat":
        return Quat(self.x * s, self.y * s, self.z * s, self.w * s)

    def _plus(self, other: "Quat") -> "Quat":
        return Quat(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def dot(self, other: "Quat") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Quat":
        return self._scaled(1.0 / self.length())

    def slerp(self, other: "Quat", t: float) -> "Quat":
        """Spherical linear interpolation along the shortest arc."""
        dot = self.dot(other)
        if dot < 0.0:
            other = -other
            dot = -dot
        if dot > 1.0 - _EPSILON:
            return self._plus(other._plus(-self)._scaled(t)).normalize()
        theta = math.acos(dot)
        scale1 = math.sin(theta * (1.0 - t))
        scale2 = math.sin(theta * t)
        return self._scaled(scale1)._plus(other._scaled(scale2))._scaled(1.0 / math.sin(theta))

    def rotate(self, v: Vec3) -> Vec3:
        """Rotate a vector by this quaternion."""
        q = Vec3(self.x, self.y, self.z)
        t = q.cross(v) * 2.0
        return v + t * self.w + q.cross(t)


Quat.IDENTITY = Quat(0.0, 0.0, 0.0, 1.0)


@dataclass
class Transform:
    """Position and orientation of an entity."""

    translation: Vec3 = Vec3.ZERO
    rotation: Quat = Quat.IDENTITY

    def forward(self) -> Vec3:
        return self.rotation.rotate(Vec3(0.0, 0.0, -1.0))

    def right(self) -> Vec3:
        return self.rotation.rotate(Vec3.X)

    def look_at(self, target: Vec3, up: Vec3) -> None:
        """Turn so that forward points at ``target`` with ``up`` as the up hint."""
        direction = (target - self.translation).normalize_or_zero()
        if direction == Vec3.ZERO:
            direction = Vec3(0.0, 0.0, -1.0)
        up = up.normalize_or_zero()
        if up == Vec3.ZERO:
            up = Vec3.Y
        back = -direction
        right = up.cross(back).normalize_or_zero()
        if right == Vec3.ZERO:
            right = up._any_orthonormal()
        new_up = back.cross(right)
        self.rotation = Quat._from_axes(right, new_up, back)


@dataclass
class Timer:
    """A one-shot countdown timer measured in seconds."""

    duration: float
    elapsed: float = 0.0
    finished: bool = False

    def tick(self, delta: float) -> None:
        self.elapsed = min(self.elapsed + delta, self.duration)
        self.finished = self.elapsed >= self.duration

    def reset(self) -> None:
        self.elapsed = 0.0
        self.finished = False


class ResourceType(Enum):
    """Kinds of gatherable resources."""

    WOOD = "Wood"
    STONE = "Stone"
    ORE = "Ore"

    def get_name(self) -> str:
        return self.value


@dataclass
class Player:
    """Player attributes."""

    speed: float = 5.0
    gathering_range: float = 2.0
    gathering_cooldown: Timer = field(default_factory=lambda: Timer(1.0))


@dataclass
class Gatherable:
    """A resource node that can be gathered."""

    resource_type: ResourceType
    health: int = 100
    respawn_timer: Optional[Timer] = None


@dataclass
class PlayerInventory:
    """Resource counts held by the player, each capped at ``max_stack_size``."""

    resources: Dict[ResourceType, int] = field(default_factory=dict)
    max_stack_size: int = 10

    def count(self, resource_type: ResourceType) -> int:
        return self.resources.get(resource_type, 0)

    def add(self, resource_type: ResourceType) -> Optional[int]:
        """Add one unit; return the new total, or None if the stack is full."""
        current = self.count(resource_type)
        if current >= self.max_stack_size:
            return None
        self.resources[resource_type] = current + 1
        return current + 1


@dataclass
class GameAssets:
    """Paths of the game's model assets."""

    player_model: str = ""
    tree_models: List[str] = field(default_factory=list)
    rock_model: str = ""