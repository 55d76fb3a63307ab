"""rayspace/cli.py

Command line access to the light field operations.

    rayspace focalstack lf.png stack.tif 16 16 -1 1 0.1
    rayspace warp lf.png lfmap.npy out.png 8 8 quick
    rayspace point lf.png 16 16 0.5 0.5 0.1 -o newlf.png
"""

import argparse
import logging
import sys

from . import config
from .io import check_format, load_image, save
from .lifi import LightField, alpha_range, focal_stack, splat_point, warp_lf


def _focalstack(args):
    alphas = alpha_range(args.min_alpha, args.max_alpha, args.delta_alpha)
    lf = LightField(load_image(args.input), args.lenslet_width, args.lenslet_height)
    check_format(args.output, len(alphas), lf.nC)
    stack = focal_stack(lf, args.min_alpha, args.max_alpha, args.delta_alpha)
    save(stack, args.output)
    return stack


def _warp(args):
    quick = False
    # parse the rest of the options
    for opt in args.options:
        if opt == "quick":
            quick = True
        else:
            raise ValueError(f"Unknown warp option {opt!r}")
    warper = load_image(args.index)
    lf = LightField(
        load_image(args.lightfield), args.lenslet_width, args.lenslet_height
    )
    check_format(args.output, warper.shape[0], lf.nC)
    out = warp_lf(lf, warper, quick=quick)
    save(out, args.output)
    return out


def _point(args):
    image = load_image(args.input)
    check_format(args.output or args.input, image.shape[0], image.shape[-1])
    lf = LightField(image, args.lenslet_width, args.lenslet_height)
    splat_point(lf, args.px, args.py, args.pz)
    save(image, args.output or args.input)
    return image


def _add_lenslet_args(parser):
    parser.add_argument("lenslet_width", type=int, help="lenslet width in pixels")
    parser.add_argument("lenslet_height", type=int, help="lenslet height in pixels")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="rayspace", description="Focal stacks, warps and edits of light fields"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="log more, repeatable"
    )
    parser.add_argument("--show", action="store_true", help="display the result")
    sub = parser.add_subparsers(dest="command", required=True)

    fs = sub.add_parser(
        "focalstack",
        help="turn a 4d light field into a 3d focal stack",
        description="Turns a 4d light field into a 3d focal stack. alpha is the "
        "slope in line space, the stack holds one frame per alpha from "
        "min_alpha to max_alpha in steps of delta_alpha.",
    )
    fs.add_argument("input", help="lenslet image")
    fs.add_argument("output", help="focal stack, .tif or .npy for multiple frames")
    _add_lenslet_args(fs)
    fs.add_argument("min_alpha", type=float)
    fs.add_argument("max_alpha", type=float)
    fs.add_argument("delta_alpha", type=float)
    fs.set_defaults(func=_focalstack)

    wp = sub.add_parser(
        "warp",
        help="sample a light field through an (s, t, u, v) index image",
        description="Treats the index image as coordinates within [0, 1] into the "
        "light field and samples quadrilinearly into it. The index image must "
        "have 4 channels, the s, t, u and v coordinates in that order. "
        "An extra argument of 'quick' switches nearest neighbor resampling on.",
    )
    wp.add_argument("lightfield", help="lenslet image")
    wp.add_argument("index", help="4 channel index image")
    wp.add_argument("output")
    _add_lenslet_args(wp)
    wp.add_argument("options", nargs="*", metavar="quick")
    wp.set_defaults(func=_warp)

    pt = sub.add_parser(
        "point",
        help="color a single 3d point white in a light field",
        description="Colors a single 3d point white in the given light field. x "
        "and y should be in the range [0, 1], while z is disparity. z = 0 will "
        "be at the focal plane.",
    )
    pt.add_argument("input", help="lenslet image, overwritten unless -o is given")
    _add_lenslet_args(pt)
    pt.add_argument("px", type=float)
    pt.add_argument("py", type=float)
    pt.add_argument("pz", type=float)
    pt.add_argument("-o", "--output", default=None)
    pt.set_defaults(func=_point)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.getLevelName(str(config.LOG_LEVEL).upper())
    if not isinstance(level, int):
        level = logging.WARNING
    level = max(logging.DEBUG, level - 10 * args.verbose)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        result = args.func(args)
    except ValueError as err:
        logging.error(f"{args.command}: {err}")
        return 1

    if args.show:
        import matplotlib.pyplot as plt

        from .lifi.plot import show_image

        show_image(result)
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
