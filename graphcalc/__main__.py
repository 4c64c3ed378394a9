import argparse
import logging

from .config import PlotterConfig
from .functions import FunctionList
from .plotter import GraphPlotter
from .surfaces import SvgSurface

logger = logging.getLogger("graphcalc")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphcalc",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-e",
        "--expr",
        action="append",
        default=None,
        help="function of x to plot; repeat for several (default: x^2)",
    )
    parser.add_argument(
        "-o",
        "--out-file",
        default=None,
        help="render a single frame to this SVG file instead of opening the viewer",
    )
    parser.add_argument(
        "--dims",
        type=int,
        default=[800, 600],
        nargs=2,
        help="The dimensions of the drawing surface, in pixels",
    )
    parser.add_argument(
        "--window",
        type=float,
        default=[-10.0, 10.0, -10.0, 10.0],
        nargs=4,
        metavar=("XMIN", "XMAX", "YMIN", "YMAX"),
        help="The world coordinates shown at start-up",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = PlotterConfig(width=args.dims[0], height=args.dims[1], default_window=tuple(args.window))
        plotter = GraphPlotter(config)
    except ValueError as e:
        parser.error(str(e))

    functions = FunctionList(config.palette)
    for expr in args.expr or ["x^2"]:
        functions.add(expr)
    plotter.set_functions(functions)

    if args.out_file:
        surface = SvgSurface(config.width, config.height)
        plotter.attach(surface)
        surface.save(args.out_file)
        logger.info("wrote %s", args.out_file)
        return 0

    from .viewer import PlotterViewer

    PlotterViewer(plotter).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
