import logging
import os

import torch
from torchvision.transforms.functional import to_pil_image

from ray_tracer.color import Color

logger = logging.getLogger(__name__)

PPM_ID = "P3"
MAX_COLOR_VALUE = 255


class Canvas(object):
    """Grid of colors stored as a 3 x height x width float64 tensor."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = torch.zeros(3, height, width, dtype=torch.float64)

    @classmethod
    def from_tensor(cls, pixels: torch.Tensor):
        _, height, width = pixels.size()
        self = cls(width, height)
        self.pixels = pixels.to(torch.float64)

        return self

    def _check_bounds(self, x, y):
        if not (0 <= x < self.width):
            raise IndexError("x value {} must be in [0, {})".format(x, self.width))
        if not (0 <= y < self.height):
            raise IndexError("y value {} must be in [0, {})".format(y, self.height))

    def write_pixel(self, x, y, color: Color):
        self._check_bounds(x, y)
        self.pixels[:, y, x] = color.data

    def pixel_at(self, x, y):
        self._check_bounds(x, y)

        return Color.from_tensor(self.pixels[:, y, x].clone())

    def write_row(self, y, row: torch.Tensor):
        self._check_bounds(0, y)
        self.pixels[:, y, :] = row

    def to_ppm(self):
        lines = [PPM_ID, "{} {}".format(self.width, self.height), str(MAX_COLOR_VALUE)]

        values = (self.pixels * MAX_COLOR_VALUE).clamp(0, MAX_COLOR_VALUE)
        values = values.permute(1, 2, 0).reshape(-1, 3).tolist()
        for r, g, b in values:
            lines.append("{} {} {}".format(int(r), int(g), int(b)))

        return "\n".join(lines) + "\n"

    def to_image(self):
        return to_pil_image(self.pixels.clamp(0, 1).float())

    def save(self, path):
        dir_name = os.path.dirname(path)
        if dir_name:
            os.makedirs(dir_name, exist_ok=True)

        if os.path.splitext(path)[1].lower() == ".ppm":
            with open(path, "w") as f:
                f.write(self.to_ppm())
        else:
            self.to_image().save(path)

        logger.info("wrote {}x{} image to {}".format(self.width, self.height, path))
