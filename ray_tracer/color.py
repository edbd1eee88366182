import numbers

import torch

from ray_tracer.utils import EPSILON, tensor_equals


class Color(object):
    """RGB color with unbounded float64 channels; 1.0 is full intensity."""

    def __init__(self, red, green, blue):
        self._data = torch.tensor([red, green, blue], dtype=torch.float64)

    @classmethod
    def from_tensor(cls, data: torch.Tensor):
        self = cls.__new__(cls)
        self._data = data.to(torch.float64)

        return self

    @property
    def data(self):
        return self._data.clone()

    @property
    def red(self):
        return self._data[0].item()

    @property
    def green(self):
        return self._data[1].item()

    @property
    def blue(self):
        return self._data[2].item()

    def __iter__(self):
        return iter(self._data.tolist())

    def __add__(self, other):
        if not isinstance(other, Color):
            return NotImplemented

        return Color.from_tensor(self._data + other._data)

    def __sub__(self, other):
        if not isinstance(other, Color):
            return NotImplemented

        return Color.from_tensor(self._data - other._data)

    def __mul__(self, other):
        # hadamard product for two colors
        if isinstance(other, Color):
            return Color.from_tensor(self._data * other._data)
        if isinstance(other, numbers.Real):
            return Color.from_tensor(self._data * other)

        return NotImplemented

    __rmul__ = __mul__

    def clamp(self, low=0.0, high=1.0):
        return Color.from_tensor(self._data.clamp(low, high))

    def equals(self, other, eps=EPSILON):
        return tensor_equals(self._data, other._data, eps=eps)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented

        return self.equals(other)

    __hash__ = None

    def __repr__(self):
        return "Color({}, {}, {})".format(self.red, self.green, self.blue)


def color(red, green, blue):
    return Color(red, green, blue)


BLACK = Color(0, 0, 0)
WHITE = Color(1, 1, 1)
