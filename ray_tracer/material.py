from dataclasses import dataclass, field

from ray_tracer.color import Color, color


@dataclass
class Material(object):
    """Phong surface parameters.

    ambient, diffuse and specular are conventionally in [0, 1] and
    shininess in [10, 200]; neither range is enforced.
    """

    color: Color = field(default_factory=lambda: color(1, 1, 1))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
