import logging

from ray_tracer.camera import Camera
from ray_tracer.color import color
from ray_tracer.light import PointLight
from ray_tracer.material import Material
from ray_tracer.objects import Sphere
from ray_tracer.transformations import (
    compose,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from ray_tracer.vector import point, vector
from ray_tracer.world import World

logger = logging.getLogger(__name__)

TRANSFORMS = {
    "translation": translation,
    "scaling": scaling,
    "rotation_x": rotation_x,
    "rotation_y": rotation_y,
    "rotation_z": rotation_z,
    "shearing": shearing,
}


def build_transform(steps):
    transforms = []
    for step in steps:
        if step.type not in TRANSFORMS:
            raise AssertionError("invalid transform {}".format(step.type))
        transforms.append(TRANSFORMS[step.type](*step.args))

    return compose(*transforms)


def build_material(config):
    config = dict(config)
    if "color" in config:
        config["color"] = color(*config["color"])

    return Material(**config)


def build_object(config):
    if config.type == "sphere":
        return Sphere(
            transform=build_transform(config.get("transform", [])),
            material=build_material(config.get("material", {})),
        )
    else:
        raise AssertionError("invalid object {}".format(config.type))


def build_world(config):
    light = None
    if config.get("light") is not None:
        light = PointLight(point(*config.light.position), color(*config.light.intensity))

    objects = [build_object(c) for c in config.objects]
    logger.info("scene has {} objects".format(len(objects)))

    return World(objects=objects, light=light)


def build_camera(config):
    transform = view_transform(
        point(*config.camera.from_), point(*config.camera.to), vector(*config.camera.up)
    )

    return Camera(
        config.render.width,
        config.render.height,
        config.render.field_of_view,
        transform=transform,
    )
