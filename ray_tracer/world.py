import logging
from typing import List, Optional

from ray_tracer.color import BLACK, color
from ray_tracer.intersections import Computations, Intersection, hit, prepare_computations
from ray_tracer.light import PointLight, lighting
from ray_tracer.material import Material
from ray_tracer.objects import Object, Sphere
from ray_tracer.ray import Ray
from ray_tracer.transformations import scaling
from ray_tracer.vector import Point, magnitude, normalize, point

logger = logging.getLogger(__name__)


class World(object):
    def __init__(self, objects: List[Object] = None, light: Optional[PointLight] = None):
        self.objects = objects if objects is not None else []
        self.light = light

    def intersect(self, ray: Ray) -> List[Intersection]:
        xs = []
        for object in self.objects:
            xs.extend(object.intersect(ray))

        return sorted(xs, key=lambda i: i.t)

    def is_shadowed(self, point: Point):
        if self.light is None:
            return False

        to_light = self.light.position - point
        distance = magnitude(to_light)
        h = hit(self.intersect(Ray(point, normalize(to_light))))

        return h is not None and h.t < distance

    def shade_hit(self, comps: Computations):
        if self.light is None:
            return BLACK

        return lighting(
            comps.object.material,
            self.light,
            comps.over_point,
            comps.eye,
            comps.normal,
            in_shadow=self.is_shadowed(comps.over_point),
        )

    def color_at(self, ray: Ray):
        h = hit(self.intersect(ray))
        if h is None:
            return BLACK

        return self.shade_hit(prepare_computations(h, ray))


def default_world():
    light = PointLight(point(-10, 10, -10), color(1, 1, 1))
    outer = Sphere(material=Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
    objects = [outer, inner]
    logger.debug("built default world with {} objects".format(len(objects)))

    return World(objects=objects, light=light)
