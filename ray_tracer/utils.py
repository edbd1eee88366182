import torch

EPSILON = 1e-5


def float_equals(a, b, eps=EPSILON):
    return abs(a - b) < eps


def tensor_equals(a: torch.Tensor, b: torch.Tensor, eps=EPSILON):
    if a.size() != b.size():
        return False

    return bool(((a - b).abs() < eps).all())
