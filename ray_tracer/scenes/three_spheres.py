import math

from all_the_tools.config import Config as C

wall = C(color=(1, 0.9, 0.9), specular=0)

config = C(
    render=C(width=200, height=100, field_of_view=math.pi / 3),
    camera=C(from_=(0, 1.5, -5), to=(0, 1, 0), up=(0, 1, 0)),
    light=C(position=(-10, 10, -10), intensity=(1, 1, 1)),
    objects=[
        # floor
        C(
            type="sphere",
            transform=[C(type="scaling", args=(10, 0.01, 10))],
            material=wall,
        ),
        # left wall
        C(
            type="sphere",
            transform=[
                C(type="scaling", args=(10, 0.01, 10)),
                C(type="rotation_x", args=(math.pi / 2,)),
                C(type="rotation_y", args=(-math.pi / 4,)),
                C(type="translation", args=(0, 0, 5)),
            ],
            material=wall,
        ),
        # right wall
        C(
            type="sphere",
            transform=[
                C(type="scaling", args=(10, 0.01, 10)),
                C(type="rotation_x", args=(math.pi / 2,)),
                C(type="rotation_y", args=(math.pi / 4,)),
                C(type="translation", args=(0, 0, 5)),
            ],
            material=wall,
        ),
        C(
            type="sphere",
            transform=[C(type="translation", args=(-0.5, 1, 0.5))],
            material=C(color=(0.1, 1, 0.5), diffuse=0.7, specular=0.3),
        ),
        C(
            type="sphere",
            transform=[
                C(type="scaling", args=(0.5, 0.5, 0.5)),
                C(type="translation", args=(1.5, 0.5, -0.5)),
            ],
            material=C(color=(0.5, 1, 0.1), diffuse=0.7, specular=0.3),
        ),
        C(
            type="sphere",
            transform=[
                C(type="scaling", args=(0.33, 0.33, 0.33)),
                C(type="translation", args=(-1.5, 0.33, -0.75)),
            ],
            material=C(color=(1, 0.8, 0.1), diffuse=0.7, specular=0.3),
        ),
    ],
)
