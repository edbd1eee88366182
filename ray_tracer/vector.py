import numbers

import torch

from ray_tracer.errors import DegenerateVector, InvalidHomogeneousCoordinate
from ray_tracer.utils import EPSILON, tensor_equals

POINT_W = 1.0
VECTOR_W = 0.0


class Tuple(object):
    """Homogeneous (x, y, z, w) coordinate.

    w is 1.0 for a point and 0.0 for a vector. Arithmetic builds the
    result from the raw components and returns a Point or a Vector according
    to the resulting w, so operations that would leave w outside {0, 1}
    (point + point, vector - point) raise InvalidHomogeneousCoordinate.
    """

    def __init__(self, x, y, z, w):
        self._data = self._validate(torch.tensor([x, y, z, w], dtype=torch.float64))

    @staticmethod
    def _validate(data):
        w = data[3].item()
        if w != VECTOR_W and w != POINT_W:
            raise InvalidHomogeneousCoordinate(w)

        return data

    @classmethod
    def from_tensor(cls, data: torch.Tensor):
        data = cls._validate(data.to(torch.float64))
        if data[3].item() == POINT_W:
            cls = Point
        else:
            cls = Vector

        self = cls.__new__(cls)
        self._data = data

        return self

    @property
    def data(self):
        return self._data.clone()

    @property
    def x(self):
        return self._data[0].item()

    @property
    def y(self):
        return self._data[1].item()

    @property
    def z(self):
        return self._data[2].item()

    @property
    def w(self):
        return self._data[3].item()

    @property
    def is_point(self):
        return self.w == POINT_W

    @property
    def is_vector(self):
        return self.w == VECTOR_W

    def __iter__(self):
        return iter(self._data.tolist())

    def __add__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented

        return Tuple.from_tensor(self._data + other._data)

    def __sub__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented

        return Tuple.from_tensor(self._data - other._data)

    def __neg__(self):
        return self * -1

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented

        data = self._data.clone()
        data[:3] *= scalar

        return Tuple.from_tensor(data)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented

        return self * (1 / scalar)

    def equals(self, other, eps=EPSILON):
        return tensor_equals(self._data, other._data, eps=eps)

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented

        return self.equals(other)

    __hash__ = None

    def __repr__(self):
        return "{}({}, {}, {})".format(type(self).__name__, self.x, self.y, self.z)


class Point(Tuple):
    def __init__(self, x, y, z):
        super().__init__(x, y, z, POINT_W)


class Vector(Tuple):
    def __init__(self, x, y, z):
        super().__init__(x, y, z, VECTOR_W)


def point(x, y, z):
    return Point(x, y, z)


def vector(x, y, z):
    return Vector(x, y, z)


def dot(a: Tuple, b: Tuple):
    return torch.dot(a._data[:3], b._data[:3]).item()


def magnitude(v: Tuple):
    return v._data[:3].norm().item()


def normalize(v: Vector):
    m = magnitude(v)
    if m == 0:
        raise DegenerateVector("cannot normalize a zero-length vector")

    return v / m


def cross(a: Vector, b: Vector):
    if not (a.is_vector and b.is_vector):
        raise TypeError("cross product is defined for vectors only")

    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def reflect(v: Vector, n: Vector):
    return v - n * 2 * dot(v, n)
