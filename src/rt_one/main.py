# main.py
import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from rt_one.camera.camera import Camera
from rt_one.config import QUALITY_LEVELS, RenderSettings
from rt_one.core.vector import Vector3
from rt_one.geometry.world import World
from rt_one.renderer import ppm
from rt_one.renderer.output import save_image
from rt_one.renderer.raytracer import Renderer
from rt_one.renderer.tone_mapping import TONE_MAPPERS
from rt_one.scenes import SCENES, get_scene, single_sphere, small_sphere

logger = logging.getLogger("rt_one")

AMBER = Vector3(1.0, 0.95, 0.78)


def first_ppm(args: argparse.Namespace) -> None:
    """Red grows left to right, green top to bottom."""
    data = np.zeros((256, 256, 3), dtype=np.uint8)
    data[:, :, 0] = np.arange(256)[np.newaxis, :]
    data[:, :, 1] = np.arange(256)[:, np.newaxis]
    ppm.write_path(256, data, args.output)
    logger.info(f"Wrote 256x256 image to {args.output}")


def _chapter_render(args: argparse.Namespace, world: World, mode: str, **kwargs) -> None:
    camera = Camera(args.width)
    renderer = Renderer(camera, world, mode=mode, **kwargs)
    save_image(renderer.render(), args.output, gamma=args.gamma)


def gradient(args: argparse.Namespace) -> None:
    _chapter_render(args, World(), "sky")


def ray_sphere(args: argparse.Namespace) -> None:
    _chapter_render(args, small_sphere(), "flat", flat=AMBER)


def ray_sphere_normal(args: argparse.Namespace) -> None:
    _chapter_render(args, single_sphere(), "normals")


def render(args: argparse.Namespace) -> None:
    settings = RenderSettings.from_quality(
        args.quality,
        image_width=args.width,
        samples_per_pixel=args.samples,
        max_depth=args.depth,
        fov_degrees=args.fov,
        seed=args.seed,
        gamma=args.gamma,
        tone_map=args.tone_map,
    ).validate()

    world = get_scene(args.scene)
    for entry in world.describe():
        logger.debug(f"Scene object: {entry}")

    camera = Camera(settings.image_width, settings.aspect_ratio, fov=settings.fov)
    renderer = Renderer(
        camera,
        world,
        samples_per_pixel=settings.samples_per_pixel,
        max_depth=settings.max_depth,
        rng=np.random.default_rng(settings.seed),
        min_dist=settings.min_dist,
        max_dist=settings.max_dist,
    )
    save_image(renderer.render(), args.output, gamma=settings.gamma,
               tone_map=settings.tone_map)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rt-one",
        description="A small recursive ray tracer for scenes of spheres.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true",
                           help="Log per-row progress")
    verbosity.add_argument("-q", "--quiet", action="store_true",
                           help="Only log warnings and errors")

    commands = parser.add_subparsers(dest="command", required=True)

    cmd = commands.add_parser("first-ppm", help="Write a red/green byte gradient")
    cmd.add_argument("-o", "--output", default="image.ppm")
    cmd.set_defaults(func=first_ppm)

    chapters = [
        ("gradient", gradient, "Write the white to blue sky gradient"),
        ("ray-sphere", ray_sphere, "Write a flat-colored sphere against the sky"),
        ("ray-sphere-normal", ray_sphere_normal, "Write a sphere shaded by its normals"),
    ]
    for name, func, text in chapters:
        cmd = commands.add_parser(name, help=text)
        cmd.add_argument("-o", "--output", default=f"{name.replace('-', '_')}.ppm")
        cmd.add_argument("--width", type=int, default=400,
                         help="Image width in pixels (default: 400)")
        cmd.add_argument("--gamma", action=argparse.BooleanOptionalAction, default=False,
                         help="sRGB-encode the output (default: off)")
        cmd.set_defaults(func=func)

    cmd = commands.add_parser("render", help="Path trace one of the built-in scenes")
    cmd.add_argument("-o", "--output", default="render.ppm",
                     help="Output file; .ppm or any format Pillow can write")
    cmd.add_argument("--scene", choices=sorted(SCENES), default="three-spheres")
    cmd.add_argument("--quality", choices=list(QUALITY_LEVELS), default="balanced")
    cmd.add_argument("--width", type=int, help="Image width in pixels")
    cmd.add_argument("--samples", type=int, help="Samples per pixel")
    cmd.add_argument("--depth", type=int, help="Maximum number of bounces")
    cmd.add_argument("--fov", type=float, help="Vertical field of view in degrees")
    cmd.add_argument("--seed", type=int, help="Random seed for a reproducible image")
    cmd.add_argument("--gamma", action=argparse.BooleanOptionalAction, default=True,
                     help="sRGB-encode the output (default: on)")
    cmd.add_argument("--tone-map", choices=sorted(TONE_MAPPERS), default="none")
    cmd.set_defaults(func=render)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        args.func(args)
    except (ValueError, OSError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
