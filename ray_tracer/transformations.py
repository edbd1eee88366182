import math

from ray_tracer.errors import DegenerateVector
from ray_tracer.matrix import Matrix
from ray_tracer.utils import EPSILON
from ray_tracer.vector import Point, Vector, cross, magnitude, normalize


def translation(x, y, z):
    """
    | 1 0 0 x |
    | 0 1 0 y |
    | 0 0 1 z |
    | 0 0 0 1 |
    """
    m = Matrix.identity(4)
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z

    return m


def scaling(x, y, z):
    m = Matrix.identity(4)
    m[0, 0] = x
    m[1, 1] = y
    m[2, 2] = z

    return m


def rotation_x(radians):
    """
    | 1 0      0       0 |
    | 0 cos(r) -sin(r) 0 |
    | 0 sin(r) cos(r)  0 |
    | 0 0      0       1 |
    """
    c, s = math.cos(radians), math.sin(radians)
    m = Matrix.identity(4)
    m[1, 1] = c
    m[1, 2] = -s
    m[2, 1] = s
    m[2, 2] = c

    return m


def rotation_y(radians):
    """
    | cos(r)  0 sin(r) 0 |
    | 0       1 0      0 |
    | -sin(r) 0 cos(r) 0 |
    | 0       0 0      1 |
    """
    c, s = math.cos(radians), math.sin(radians)
    m = Matrix.identity(4)
    m[0, 0] = c
    m[0, 2] = s
    m[2, 0] = -s
    m[2, 2] = c

    return m


def rotation_z(radians):
    """
    | cos(r) -sin(r) 0 0 |
    | sin(r) cos(r)  0 0 |
    | 0      0       1 0 |
    | 0      0       0 1 |
    """
    c, s = math.cos(radians), math.sin(radians)
    m = Matrix.identity(4)
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c

    return m


def shearing(xy, xz, yx, yz, zx, zy):
    """
    | 1  xy xz 0 |
    | yx 1  yz 0 |
    | zx zy 1  0 |
    | 0  0  0  1 |

    xy moves x in proportion to y, and so on.
    """
    m = Matrix.identity(4)
    m[0, 1] = xy
    m[0, 2] = xz
    m[1, 0] = yx
    m[1, 2] = yz
    m[2, 0] = zx
    m[2, 1] = zy

    return m


def compose(*transforms):
    """Combine transforms so that the first one given is applied first.

    compose(a, b, c) == c @ b @ a
    """
    result = Matrix.identity(4)
    for t in transforms:
        result = t @ result

    return result


def view_transform(from_: Point, to: Point, up: Vector):
    """World-to-camera matrix for an eye at `from_` looking at `to`.

    `up` only needs to be roughly up; the true up vector is recomputed
    from the forward and right vectors. Raises DegenerateVector when `up`
    is parallel to the viewing direction.
    """
    forward = normalize(from_ - to)
    right = cross(up, forward)
    if magnitude(right) < EPSILON:
        raise DegenerateVector("up vector is parallel to the view direction")
    right = normalize(right)
    true_up = cross(forward, right)

    orientation = Matrix(
        [
            [right.x, right.y, right.z, 0],
            [true_up.x, true_up.y, true_up.z, 0],
            [forward.x, forward.y, forward.z, 0],
            [0, 0, 0, 1],
        ]
    )

    return orientation @ translation(-from_.x, -from_.y, -from_.z)
