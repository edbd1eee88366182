from dataclasses import dataclass

from ray_tracer.color import BLACK, Color
from ray_tracer.material import Material
from ray_tracer.vector import Point, Vector, dot, normalize, reflect


@dataclass(frozen=True)
class PointLight(object):
    position: Point
    intensity: Color


def lighting(
    material: Material,
    light: PointLight,
    point: Point,
    eye: Vector,
    normal: Vector,
    in_shadow: bool = False,
):
    """Phong shading of `point` as seen along `eye`.

    Sums the ambient, diffuse and specular contributions. A point in shadow
    only receives the ambient term.
    """
    effective_color = material.color * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    to_light = normalize(light.position - point)

    # cosine of the angle between the light and the normal,
    # negative when the light is on the other side of the surface
    light_dot_normal = dot(to_light, normal)
    if light_dot_normal < 0:
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    reflected = reflect(-to_light, normal)
    reflect_dot_eye = dot(reflected, eye)
    if reflect_dot_eye > 0:
        factor = reflect_dot_eye ** material.shininess
        specular = light.intensity * material.specular * factor
    else:
        specular = BLACK

    return ambient + diffuse + specular
