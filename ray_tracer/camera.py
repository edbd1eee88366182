import math

import torch

from ray_tracer.canvas import Canvas
from ray_tracer.matrix import Matrix, inverse
from ray_tracer.ray import Ray
from ray_tracer.vector import normalize, point


class Camera(object):
    """Pinhole camera looking down -z from the origin of its own space.

    `transform` orients the world relative to the camera (usually a
    view_transform). The canvas sits one unit in front of the eye.
    """

    def __init__(self, hsize: int, vsize: int, field_of_view: float, transform: Matrix = None):
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform if transform is not None else Matrix.identity(4)

        half_view = math.tan(field_of_view / 2)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = self.half_width * 2 / hsize

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

    def ray_for_pixel(self, px, py):
        # offsets to the pixel center, +x is to the left since the camera looks toward -z
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        inv = self.inverse_transform
        pixel = inv @ point(world_x, world_y, -1)
        origin = inv @ point(0, 0, 0)

        return Ray(origin, normalize(pixel - origin))

    def render_row(self, world, y):
        row = torch.zeros(3, self.hsize, dtype=torch.float64)
        for x in range(self.hsize):
            row[:, x] = world.color_at(self.ray_for_pixel(x, y)).data

        return row

    def render(self, world):
        image = Canvas(self.hsize, self.vsize)
        for y in range(self.vsize):
            image.write_row(y, self.render_row(world, y))

        return image
