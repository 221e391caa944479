"""CLI entry point for fuzzyplot.

Invoke as:  python -m fuzzyplot "y=x^2" -o parabola.png
"""

# Bootstrap: when run as `python fuzzyplot` (directory path), re-execute
# through runpy so the package machinery resolves relative imports.
if __name__ == "__main__" and not __package__:
    import os
    import runpy
    import sys

    _root_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if _root_dir not in sys.path:
        sys.path.insert(0, _root_dir)
    runpy.run_module("fuzzyplot", run_name="__main__", alter_sys=True)
    raise SystemExit(0)  # unreachable — run_module already calls sys.exit()

import argparse
import sys

from ._common import (
    DEFAULT_CENTER,
    DEFAULT_GRID_SIZE,
    DEFAULT_OUTFILE,
    DEFAULT_SHARPNESS,
    DEFAULT_SIZE,
    DEFAULT_T_RANGE,
    DEFAULT_ZOOM,
    FuzzyplotError,
)
from .params import make_params
from .plots import make_plots
from .render import image_format, render, save_image

DESCRIPTION = """\
Output a fuzzy-plotted graph image of up to 3 equations.

Instead of plotting only the points where an equation holds exactly,
fuzzyplot colours every point by how close the two sides are.

Equations have the form "<expression>=<expression>" and may use:
  variables   x, y, r, t (theta)
  operators   + - * / ^          e.g. (-x)^3, 2x
  functions   sin cos tan asin acos atan sinh cosh tanh
              exp log ln sqrt abs re im arg, log(n, base)
  constants   e i pi tau         e.g. 2 + 3*i
"""

EPILOG = """\
--t-range MIN MAX: each integer n selects the full turn of angles centred on
n*tau, so n = 0 is [-tau/2, tau/2] and n = 1 is [tau/2, 3tau/2]. The range of
n is inclusive.

--zoom z sets the view "radius" along the shorter image side to 2^(-z); the
default -1 on a square image shows (-2, -2) to (2, 2).

Any argument containing '=' is read as an equation, so "-r=t" needs no "--";
give option values with a space ("-z 2", not "-z=2").
"""


# Number of values taken by each option that has any
OPTION_VALUES = {
    "-o": 1,
    "--outfile": 1,
    "-s": 2,
    "--size": 2,
    "-z": 1,
    "--zoom": 1,
    "-t": 2,
    "--t-range": 2,
    "-g": 1,
    "--grid-size": 1,
    "--sharpness": 1,
    "-c": 2,
    "--center": 2,
}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="fuzzyplot",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("equations", nargs="*", help="equation(s) to plot (maximum 3)")
    parser.add_argument(
        "-A", "--axisless", action="store_true", help="don't draw the axes or grid"
    )
    parser.add_argument(
        "-p",
        "--plain",
        action="store_true",
        help="use the plain difference instead of dividing by the magnitude of both sides",
    )
    parser.add_argument(
        "-o",
        "--outfile",
        default=DEFAULT_OUTFILE,
        help="image to write; the extension picks the format (default: %(default)s)",
    )
    parser.add_argument(
        "-s",
        "--size",
        nargs=2,
        type=int,
        metavar=("WIDTH", "HEIGHT"),
        default=list(DEFAULT_SIZE),
        help="image size in pixels (default: 800 800)",
    )
    parser.add_argument(
        "-z", "--zoom", type=float, default=DEFAULT_ZOOM, help="zoom level (default: %(default)s)"
    )
    parser.add_argument(
        "-t",
        "--t-range",
        nargs=2,
        type=int,
        metavar=("MIN", "MAX"),
        default=list(DEFAULT_T_RANGE),
        help="inclusive range of full turns considered for theta (default: 0 0)",
    )
    parser.add_argument(
        "-g",
        "--grid-size",
        type=float,
        default=DEFAULT_GRID_SIZE,
        help="spacing between grid lines, 0 for none (default: %(default)s)",
    )
    parser.add_argument(
        "--sharpness",
        type=float,
        default=DEFAULT_SHARPNESS,
        help="each step up halves the line thickness (default: %(default)s)",
    )
    parser.add_argument(
        "-c",
        "--center",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        default=list(DEFAULT_CENTER),
        help="graph point at the centre of the image (default: 0 0)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="don't print progress or status"
    )
    return parser


def split_equations(argv):
    """Separate equation tokens from options, keeping the equations in order.

    Any token containing '=' is an equation unless it is a "--long=value"
    option or the value of the preceding option. Everything after "--" is an
    equation. This lets equations such as "-t=r" or "-sin(x)=y" through
    without argparse mistaking them for short options.
    """
    equations = []
    rest = []
    pending_values = 0
    for i, token in enumerate(argv):
        if pending_values:
            rest.append(token)
            pending_values -= 1
            continue
        if token == "--":
            equations.extend(argv[i + 1 :])
            break
        if "=" in token and not token.startswith("--"):
            equations.append(token)
            continue
        rest.append(token)
        pending_values = OPTION_VALUES.get(token, 0)
    return equations, rest


def parse_args(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    equations, rest = split_equations(list(argv))
    args = build_parser().parse_args(rest)
    args.equations = equations + list(args.equations)
    return args


def run(args):
    """Validate, render and save. Raises FuzzyplotError on failure."""
    image_format(args.outfile)
    width, height = args.size
    params = make_params(
        width,
        height,
        zoom=args.zoom,
        t_range=tuple(args.t_range),
        plain_diff=args.plain,
        draw_axes=not args.axisless,
        grid_size=args.grid_size,
        sharpness=args.sharpness,
        center=tuple(args.center),
    )
    plots = make_plots(args.equations)

    if not args.quiet:
        print("generating image...")
    pixels = render(plots, params, progress=not args.quiet)
    save_image(pixels, args.outfile)
    if not args.quiet:
        print(f"saved {args.outfile}")


def main(argv=None):
    args = parse_args(argv)
    try:
        run(args)
    except FuzzyplotError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
