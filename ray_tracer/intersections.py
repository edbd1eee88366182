from dataclasses import dataclass
from typing import List, Optional

from ray_tracer.ray import Ray
from ray_tracer.utils import EPSILON
from ray_tracer.vector import Point, Vector, dot


class Intersection(object):
    def __init__(self, t: float, object):
        self.t = t
        self.object = object

    def __eq__(self, other):
        if not isinstance(other, Intersection):
            return NotImplemented

        return self.t == other.t and self.object is other.object

    __hash__ = None

    def __repr__(self):
        return "Intersection(t={}, object={!r})".format(self.t, self.object)


@dataclass
class Computations(object):
    t: float
    object: object
    point: Point
    over_point: Point
    eye: Vector
    normal: Vector
    inside: bool


def intersections(*xs: Intersection) -> List[Intersection]:
    return sorted(xs, key=lambda i: i.t)


def intersect(ray: Ray, object) -> List[Intersection]:
    """Intersections of `ray` with `object`, in increasing t.

    A miss gives an empty list, a tangent ray two equal t values.
    """
    return object.intersect(ray)


def hit(xs) -> Optional[Intersection]:
    """The visible intersection: lowest non-negative t, or None."""
    for i in sorted(xs, key=lambda i: i.t):
        if i.t >= 0:
            return i

    return None


def prepare_computations(intersection: Intersection, ray: Ray) -> Computations:
    point = ray.position(intersection.t)
    eye = -ray.direction
    normal = intersection.object.normal_at(point)

    inside = dot(normal, eye) < 0
    if inside:
        normal = -normal

    return Computations(
        t=intersection.t,
        object=intersection.object,
        point=point,
        # nudged off the surface so shadow rays do not hit the object itself
        over_point=point + normal * EPSILON,
        eye=eye,
        normal=normal,
        inside=inside,
    )
