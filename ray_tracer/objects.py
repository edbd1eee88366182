import itertools
import math
from typing import List

from ray_tracer.intersections import Intersection
from ray_tracer.material import Material
from ray_tracer.matrix import Matrix, inverse, multiply, to_matrix, transpose
from ray_tracer.ray import Ray
from ray_tracer.vector import Point, Vector, dot, normalize, point

_ids = itertools.count()


class Object(object):
    """Shape placed in the world through an object-to-world transform.

    Subclasses only deal with object space: local_intersect returns the
    t values for a ray already transformed into object space, and
    local_normal_at the normal at an object-space point.
    """

    def __init__(self, transform: Matrix = None, material: Material = None):
        self.id = next(_ids)
        self.transform = transform if transform is not None else Matrix.identity(4)
        self.material = material if material is not None else Material()

    @property
    def transform(self):
        return self._transform

    @transform.setter
    def transform(self, value: Matrix):
        self._transform = value
        self._inverse = None

    @property
    def inverse_transform(self):
        if self._inverse is None:
            self._inverse = inverse(self._transform)

        return self._inverse

    def intersect(self, ray: Ray) -> List[Intersection]:
        local_ray = ray.transform(self.inverse_transform)

        return [Intersection(t, self) for t in self.local_intersect(local_ray)]

    def normal_at(self, world_point: Point) -> Vector:
        inv = self.inverse_transform
        local_normal = self.local_normal_at(inv @ world_point)

        # the inverse transpose keeps normals perpendicular under non-uniform scaling,
        # its translation column leaks into w which is dropped
        world_normal = multiply(transpose(inv), to_matrix(local_normal)).tolist()
        world_normal = Vector(world_normal[0][0], world_normal[1][0], world_normal[2][0])

        return normalize(world_normal)

    def local_intersect(self, ray: Ray) -> List[float]:
        raise NotImplementedError

    def local_normal_at(self, local_point: Point) -> Vector:
        raise NotImplementedError

    def __repr__(self):
        return "{}(id={})".format(type(self).__name__, self.id)


class Sphere(Object):
    def __init__(
        self,
        origin: Point = None,
        radius: float = 1.0,
        transform: Matrix = None,
        material: Material = None,
    ):
        super().__init__(transform=transform, material=material)

        self.origin = origin if origin is not None else point(0, 0, 0)
        self.radius = radius

    def local_intersect(self, ray: Ray):
        sr = ray.origin - self.origin

        a = dot(ray.direction, ray.direction)
        b = 2 * dot(ray.direction, sr)
        c = dot(sr, sr) - self.radius ** 2

        disc = b ** 2 - 4 * a * c
        if disc < 0:
            return []

        t1 = (-b - math.sqrt(disc)) / (2 * a)
        t2 = (-b + math.sqrt(disc)) / (2 * a)

        return [t1, t2]

    def local_normal_at(self, local_point: Point):
        return normalize(local_point - self.origin)
