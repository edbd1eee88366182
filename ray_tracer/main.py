import logging
import os
import time
from functools import partial
from multiprocessing import Pool

import click
import matplotlib.pyplot as plt
import torch
from all_the_tools.config import load_config
from tqdm import tqdm

from ray_tracer.camera import Camera
from ray_tracer.canvas import Canvas
from ray_tracer.scene import build_camera, build_world
from ray_tracer.world import World

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "scenes", "three_spheres.py")


def render_row(y, camera: Camera, world: World):
    return camera.render_row(world, y)


def render(camera: Camera, world: World, workers):
    with Pool(workers) as pool:
        image = pool.imap(partial(render_row, camera=camera, world=world), range(camera.vsize))
        image = list(tqdm(image, total=camera.vsize, desc="render"))

    return Canvas.from_tensor(torch.stack(image, 1))


@click.command()
@click.option("--config-path", type=click.Path(exists=True), default=DEFAULT_CONFIG_PATH)
@click.option("--width", type=click.INT)
@click.option("--height", type=click.INT)
@click.option("--output-path", type=click.Path(), default="./output/render.png")
@click.option("--workers", type=click.INT, default=os.cpu_count())
@click.option("--show", is_flag=True)
def main(config_path, width, height, output_path, workers, show):
    logging.basicConfig(level=logging.INFO)

    config = load_config(config_path)
    if width is not None:
        config.render.width = width
    if height is not None:
        config.render.height = height

    world = build_world(config)
    camera = build_camera(config)
    logging.info(
        "rendering {}x{} with {} workers".format(camera.hsize, camera.vsize, workers)
    )

    start = time.time()
    image = render(camera, world, workers)
    logging.info("render time: {:.2f}s".format(time.time() - start))

    image.save(output_path)

    if show:
        plt.imshow(image.to_image())
        plt.show()


if __name__ == "__main__":
    main()
