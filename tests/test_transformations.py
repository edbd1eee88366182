import math

import pytest

from ray_tracer.errors import DegenerateVector
from ray_tracer.matrix import Matrix, inverse
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
from ray_tracer.vector import normalize, point, vector

HALF_SQRT_2 = math.sqrt(2) / 2


def test_translation():
    t = translation(5, -3, 2)

    assert t @ point(-3, 4, 5) == point(2, 1, 7)
    assert inverse(t) @ point(-3, 4, 5) == point(-8, 7, 3)


def test_translation_does_not_affect_vectors():
    assert translation(5, -3, 2) @ vector(-3, 4, 5) == vector(-3, 4, 5)


def test_scaling():
    t = scaling(2, 3, 4)

    assert t @ point(-4, 6, 8) == point(-8, 18, 32)
    assert t @ vector(-4, 6, 8) == vector(-8, 18, 32)
    assert inverse(t) @ vector(-4, 6, 8) == vector(-2, 2, 2)


def test_reflection_is_negative_scaling():
    assert scaling(-1, 1, 1) @ point(2, 3, 4) == point(-2, 3, 4)


def test_rotation_x():
    p = point(0, 1, 0)

    assert rotation_x(math.pi / 4) @ p == point(0, HALF_SQRT_2, HALF_SQRT_2)
    assert rotation_x(math.pi / 2) @ p == point(0, 0, 1)
    assert inverse(rotation_x(math.pi / 4)) @ p == point(0, HALF_SQRT_2, -HALF_SQRT_2)


def test_rotation_y():
    p = point(0, 0, 1)

    assert rotation_y(math.pi / 4) @ p == point(HALF_SQRT_2, 0, HALF_SQRT_2)
    assert rotation_y(math.pi / 2) @ p == point(1, 0, 0)


def test_rotation_z():
    p = point(0, 1, 0)

    assert rotation_z(math.pi / 4) @ p == point(-HALF_SQRT_2, HALF_SQRT_2, 0)
    assert rotation_z(math.pi / 2) @ p == point(-1, 0, 0)


@pytest.mark.parametrize(
    "args, expected",
    [
        ((1, 0, 0, 0, 0, 0), point(5, 3, 4)),
        ((0, 1, 0, 0, 0, 0), point(6, 3, 4)),
        ((0, 0, 1, 0, 0, 0), point(2, 5, 4)),
        ((0, 0, 0, 1, 0, 0), point(2, 7, 4)),
        ((0, 0, 0, 0, 1, 0), point(2, 3, 6)),
        ((0, 0, 0, 0, 0, 1), point(2, 3, 7)),
    ],
)
def test_shearing(args, expected):
    assert shearing(*args) @ point(2, 3, 4) == expected


def test_transformations_applied_in_sequence():
    p = point(1, 0, 1)
    a = rotation_x(math.pi / 2)
    b = scaling(5, 5, 5)
    c = translation(10, 5, 7)

    p2 = a @ p
    assert p2 == point(1, -1, 0)
    p3 = b @ p2
    assert p3 == point(5, -5, 0)
    p4 = c @ p3
    assert p4 == point(15, 0, 7)

    assert (c @ b @ a) @ p == point(15, 0, 7)


def test_fluent_chain():
    actual = Matrix.identity(4).rotate_x(math.pi / 2).scale(5, 5, 5).translate(10, 5, 7)
    expected = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(math.pi / 2)

    assert actual == expected
    assert actual @ point(1, 0, 1) == point(15, 0, 7)


def test_fluent_chain_all_methods():
    actual = (
        Matrix.identity(4)
        .shear(1, 0, 0, 0, 0, 0)
        .rotate_y(0.3)
        .rotate_z(-1.1)
        .scale(1, 2, 3)
    )
    expected = scaling(1, 2, 3) @ rotation_z(-1.1) @ rotation_y(0.3) @ shearing(1, 0, 0, 0, 0, 0)

    assert actual == expected


def test_fluent_methods_do_not_mutate():
    m = Matrix.identity(4)
    m.translate(1, 2, 3)
    m.scale(2, 2, 2)

    assert m == Matrix.identity(4)


def test_compose():
    a = rotation_x(math.pi / 2)
    b = scaling(5, 5, 5)
    c = translation(10, 5, 7)

    assert compose(a, b, c) == c @ b @ a
    assert compose(a, b, c) @ point(1, 0, 1) == point(15, 0, 7)
    assert compose() == Matrix.identity(4)


def test_view_transform_default_orientation():
    actual = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))

    assert actual == Matrix.identity(4)


def test_view_transform_looking_in_positive_z():
    actual = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))

    assert actual == scaling(-1, 1, -1)


def test_view_transform_moves_the_world():
    actual = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))

    assert actual == translation(0, 0, -8)


@pytest.mark.parametrize(
    "from_, to, up",
    [
        (point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0)),
        (point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)),
        (point(-3, 0, 0), point(2, 2, 2), vector(0, 0, 1)),
    ],
)
def test_view_transform_maps_eye_to_origin_looking_down_negative_z(from_, to, up):
    t = view_transform(from_, to, up)

    assert t @ from_ == point(0, 0, 0)
    assert t @ normalize(to - from_) == vector(0, 0, -1)


def test_view_transform_up_parallel_to_view_direction():
    with pytest.raises(DegenerateVector):
        view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 0, 1))
