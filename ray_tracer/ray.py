from ray_tracer.errors import DegenerateVector
from ray_tracer.matrix import Matrix
from ray_tracer.vector import Point, Tuple, Vector, magnitude


class Ray(object):
    def __init__(self, origin: Point, direction: Vector):
        if not (isinstance(origin, Tuple) and origin.is_point):
            raise TypeError("ray origin must be a point, got {!r}".format(origin))
        if not (isinstance(direction, Tuple) and direction.is_vector):
            raise TypeError("ray direction must be a vector, got {!r}".format(direction))
        if magnitude(direction) == 0:
            raise DegenerateVector("ray direction must not be a zero vector")

        self._origin = origin
        self._direction = direction

    @property
    def origin(self):
        return self._origin

    @property
    def direction(self):
        return self._direction

    def position(self, t: float):
        return self.origin + self.direction * t

    def transform(self, m: Matrix):
        return Ray(m @ self.origin, m @ self.direction)

    def __eq__(self, other):
        if not isinstance(other, Ray):
            return NotImplemented

        return self.origin == other.origin and self.direction == other.direction

    __hash__ = None

    def __repr__(self):
        return "Ray({!r}, {!r})".format(self.origin, self.direction)
