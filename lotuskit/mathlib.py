"""Vector and 4x4 matrix math used by the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Union

PI = 3.14159265358979323846


def to_radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * PI / 180.0


def _inverse_length(components: tuple[float, ...]) -> float:
    length = math.sqrt(sum(c * c for c in components))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return 1.0 / length


@dataclass
class Vec2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def scale(self, factor: float) -> Vec2:
        """Return this vector multiplied by a scalar."""
        return Vec2(self.x * factor, self.y * factor)

    def dot(self, other: Vec2) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def normalized(self) -> Vec2:
        """Return the unit-length vector pointing the same way."""
        return self.scale(_inverse_length(tuple(self)))


@dataclass
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def scale(self, factor: float) -> Vec3:
        """Return this vector multiplied by a scalar."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def dot(self, other: Vec3) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def normalized(self) -> Vec3:
        """Return the unit-length vector pointing the same way."""
        return self.scale(_inverse_length(tuple(self)))

    def cross(self, other: Vec3) -> Vec3:
        """Return the cross product with another vector."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


@dataclass
class Vec4:
    """A four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: Vec4) -> Vec4:
        return Vec4(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Vec4) -> Vec4:
        return Vec4(*(a - b for a, b in zip(self, other)))

    def __neg__(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def scale(self, factor: float) -> Vec4:
        """Return this vector multiplied by a scalar."""
        return Vec4(*(c * factor for c in self))

    def dot(self, other: Vec4) -> float:
        """Return the dot product with another vector."""
        return sum(a * b for a, b in zip(self, other))

    def normalized(self) -> Vec4:
        """Return the unit-length vector pointing the same way."""
        return self.scale(_inverse_length(tuple(self)))


@dataclass
class Mat4:
    """A 4x4 matrix stored as 16 floats; translation lives in m[12..14]."""

    m: list[float] = field(default_factory=lambda: [0.0] * 16)

    def __post_init__(self) -> None:
        self.m = [float(v) for v in self.m]
        if len(self.m) != 16:
            raise ValueError("a Mat4 holds exactly 16 values")

    def __getitem__(self, index: int) -> float:
        return self.m[index]

    def __setitem__(self, index: int, value: float) -> None:
        self.m[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self.m)

    def __matmul__(self, other: Union[Mat4, Vec3]) -> Union[Mat4, Vec3]:
        if isinstance(other, Mat4):
            return mul_mat4(self, other)
        if isinstance(other, Vec3):
            return mul_mat4_vec3(self, other)
        return NotImplemented


def identity() -> Mat4:
    """Return the identity matrix."""
    return Mat4([1.0 if i % 5 == 0 else 0.0 for i in range(16)])


def mul_mat4(a: Mat4, b: Mat4) -> Mat4:
    """Multiply two matrices, treating the storage as row-major."""
    return Mat4(
        [
            sum(a.m[row * 4 + i] * b.m[i * 4 + col] for i in range(4))
            for row in range(4)
            for col in range(4)
        ]
    )


def mul_mat4_vec3(m: Mat4, v: Vec3) -> Vec3:
    """Transform a point by a matrix, including its translation."""
    return Vec3(
        m.m[0] * v.x + m.m[4] * v.y + m.m[8] * v.z + m.m[12],
        m.m[1] * v.x + m.m[5] * v.y + m.m[9] * v.z + m.m[13],
        m.m[2] * v.x + m.m[6] * v.y + m.m[10] * v.z + m.m[14],
    )


def trans_mat4(x: float, y: float, z: float) -> Mat4:
    """Return a translation matrix."""
    result = identity()
    result.m[12:15] = [float(x), float(y), float(z)]
    return result


def scale_mat4(x: float, y: float, z: float) -> Mat4:
    """Return a scaling matrix."""
    result = identity()
    result.m[0] = float(x)
    result.m[5] = float(y)
    result.m[10] = float(z)
    return result


def rot_mat4(x: float, y: float, z: float, angle: float) -> Mat4:
    """Return a rotation of ``angle`` degrees about the axis (x, y, z)."""
    result = identity()
    rad = to_radians(angle)
    c = math.cos(rad)
    s = math.sin(rad)
    t = 1.0 - c

    axis_len = math.sqrt(x * x + y * y + z * z)
    if axis_len > 0.0:
        x, y, z = x / axis_len, y / axis_len, z / axis_len

    result.m[0] = c + t * x * x
    result.m[1] = t * x * y + s * z
    result.m[2] = t * x * z - s * y

    result.m[4] = t * y * x - s * z
    result.m[5] = c + t * y * y
    result.m[6] = t * y * z + s * x

    result.m[8] = t * z * x + s * y
    result.m[9] = t * z * y - s * x
    result.m[10] = c + t * z * z
    return result


def rotx_mat4(angle: float) -> Mat4:
    """Return a rotation of ``angle`` degrees about the X axis."""
    rad = to_radians(angle)
    c, s = math.cos(rad), math.sin(rad)
    result = identity()
    result.m[5] = c
    result.m[6] = s
    result.m[9] = -s
    result.m[10] = c
    return result


def roty_mat4(angle: float) -> Mat4:
    """Return a rotation of ``angle`` degrees about the Y axis."""
    rad = to_radians(angle)
    c, s = math.cos(rad), math.sin(rad)
    result = identity()
    result.m[0] = c
    result.m[2] = -s
    result.m[8] = s
    result.m[10] = c
    return result


def rotz_mat4(angle: float) -> Mat4:
    """Return a rotation of ``angle`` degrees about the Z axis."""
    rad = to_radians(angle)
    c, s = math.cos(rad), math.sin(rad)
    result = identity()
    result.m[0] = c
    result.m[1] = s
    result.m[4] = -s
    result.m[5] = c
    return result


def perspective(fov: float, aspect: float, near: float, far: float) -> Mat4:
    """Return a perspective projection; ``fov`` is in radians."""
    result = identity()
    tan_half_fov = math.tan(fov / 2.0)
    result.m[0] = 1.0 / (aspect * tan_half_fov)
    result.m[5] = 1.0 / tan_half_fov
    result.m[10] = -(far + near) / (far - near)
    result.m[11] = -1.0
    result.m[14] = -(2.0 * far * near) / (far - near)
    return result


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat4:
    """Return an orthographic projection."""
    result = identity()
    result.m[0] = 2.0 / (right - left)
    result.m[5] = 2.0 / (top - bottom)
    result.m[10] = -2.0 / (far - near)
    result.m[12] = -(right + left) / (right - left)
    result.m[13] = -(top + bottom) / (top - bottom)
    result.m[14] = -(far + near) / (far - near)
    return result


def look_at(eye: Vec3, center: Vec3, up: Vec3) -> Mat4:
    """Return a view matrix looking from ``eye`` towards ``center``."""
    direction = (center - eye).normalized()
    right = direction.cross(up).normalized()
    true_up = right.cross(direction)

    result = identity()
    result.m[0], result.m[4], result.m[8] = right.x, right.y, right.z
    result.m[1], result.m[5], result.m[9] = true_up.x, true_up.y, true_up.z
    result.m[2], result.m[6], result.m[10] = -direction.x, -direction.y, -direction.z

    result.m[12] = -right.dot(eye)
    result.m[13] = -true_up.dot(eye)
    result.m[14] = direction.dot(eye)
    return result