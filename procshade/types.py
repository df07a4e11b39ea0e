# procshade/types.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, TypeAlias, overload

import numpy as np

Scalar: TypeAlias = float


@dataclass(frozen=True, slots=True)
class Vector2:
    x: Scalar
    y: Scalar

    @staticmethod
    def zero() -> Vector2:
        return Vector2(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Vector3:
    x: Scalar
    y: Scalar
    z: Scalar

    @staticmethod
    def zero() -> Vector3:
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def splat(value: Scalar) -> Vector3:
        return Vector3(value, value, value)

    @staticmethod
    def from_array(arr: np.ndarray) -> Vector3:
        return Vector3(float(arr[0]), float(arr[1]), float(arr[2]))

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(
            self.x + other.x,
            self.y + other.y,
            self.z + other.z,
        )

    @overload
    def __getitem__(self, index: int) -> Scalar: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Scalar, ...]: ...

    def __getitem__(self, index: Any):
        return (self.x, self.y, self.z)[index]

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass(frozen=True, slots=True)
class Quaternion:
    x: Scalar
    y: Scalar
    z: Scalar
    w: Scalar

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @staticmethod
    def identity() -> Quaternion:
        return Quaternion(0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def from_euler(pitch: float, yaw: float, roll: float) -> Quaternion:
        """
        Euler angles in radians.
        pitch = rotation about X
        yaw   = rotation about Y
        roll  = rotation about Z
        """
        cy = math.cos(yaw * 0.5)
        sy = math.sin(yaw * 0.5)
        cp = math.cos(pitch * 0.5)
        sp = math.sin(pitch * 0.5)
        cr = math.cos(roll * 0.5)
        sr = math.sin(roll * 0.5)

        return Quaternion(
            x=sp * cy * cr - cp * sy * sr,
            y=cp * sy * cr + sp * cy * sr,
            z=cp * cy * sr - sp * sy * cr,
            w=cp * cy * cr + sp * sy * sr,
        )

    def normalized(self) -> Quaternion:
        n = math.sqrt(
            self.x * self.x
            + self.y * self.y
            + self.z * self.z
            + self.w * self.w
        )
        if n == 0.0:
            return Quaternion.identity()
        inv = 1.0 / n
        return Quaternion(
            self.x * inv,
            self.y * inv,
            self.z * inv,
            self.w * inv,
        )
