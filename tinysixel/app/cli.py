from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

from ..demo import DEFAULT_SIZE, write_demo
from ..palette import DEFAULT_HUE_REGISTERS
from ..protocol import ColorSpace
from ..render_job import RenderSettings, SixelJobBuilder


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tinysixel",
        description="tinysixel: show images in sixel-capable terminals.",
    )
    parser.add_argument("path", nargs="?", help="Image to show (.png/.jpg/.gif/.bmp/.webp)")
    parser.add_argument("--demo", action="store_true", help="Show the built-in radial gradient instead of a file")
    parser.add_argument("--width", type=int, help="Resize the image to this many pixels wide")
    parser.add_argument(
        "--colors",
        type=int,
        help="Palette size (1-256 for images, default 256; hue registers for --demo, default 360)",
    )
    parser.add_argument("--no-dither", action="store_true", help="Disable Floyd-Steinberg dithering")
    parser.add_argument("--hls", action="store_true", help="Define palette registers in HLS instead of RGB")
    parser.add_argument("--rescale-hue", action="store_true", help="Map --demo registers onto hue 0-100")
    parser.add_argument(
        "--no-raster-attributes",
        action="store_true",
        help="Do not announce the image size before the sixel data",
    )
    parser.add_argument("--output", metavar="FILE", help="Write the sixel data to FILE instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information to stderr")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> RenderSettings:
    return RenderSettings(
        width=args.width,
        colors=args.colors,
        dither=not args.no_dither,
        space=ColorSpace.HLS if args.hls else ColorSpace.RGB,
        raster_attributes=not args.no_raster_attributes,
    )


def _check_flags(args: argparse.Namespace) -> Optional[str]:
    if args.path and args.demo:
        return "Provide either a file path or --demo, not both."
    if not args.path and not args.demo:
        return "Missing file path or --demo."
    if args.demo and args.hls:
        return "--hls does not apply to --demo (its palette is always HLS)."
    if args.demo and args.no_dither:
        return "--no-dither does not apply to --demo."
    if args.rescale_hue and not args.demo:
        return "--rescale-hue only applies to --demo."
    return None


def write_sixel(args: argparse.Namespace, output: BinaryIO) -> None:
    if args.demo:
        size = args.width or DEFAULT_SIZE
        write_demo(
            output,
            size,
            max(6, size - size % 6),
            registers=args.colors or DEFAULT_HUE_REGISTERS,
            rescale_hue=args.rescale_hue,
            raster_attributes=not args.no_raster_attributes,
        )
    else:
        SixelJobBuilder(build_settings(args)).write_from_file(args.path, output)
    output.flush()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    problem = _check_flags(args)
    if problem:
        print(problem + " Use --help for usage.", file=sys.stderr)
        return 2
    try:
        if args.output:
            with open(args.output, "wb") as handle:
                write_sixel(args, handle)
        else:
            write_sixel(args, sys.stdout.buffer)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
