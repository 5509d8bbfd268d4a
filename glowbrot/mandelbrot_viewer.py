import argparse

from glowbrot.mandelbrot.mandelbrot import mandelbrot
from glowbrot.utils.constants import (
    DEFAULT_COLOUR_FACTOR,
    DEFAULT_HEIGHT,
    DEFAULT_IMAG_CENTER,
    DEFAULT_ITERATIONS,
    DEFAULT_REAL_MAX,
    DEFAULT_REAL_MIN,
    DEFAULT_THREADS,
    DEFAULT_WIDTH,
)
from glowbrot.utils.mandelbrot_utils import (
    ConfigError,
    IterationBudget,
    MandelbrotConfig,
    Viewport,
    my_logger,
)


def make_cli_args(config: MandelbrotConfig):
    viewport = config.viewport
    args = (
        f"-rmin {viewport.r_min!r} -rmax {viewport.r_max!r}"
        f" -imin {viewport.i_min!r} -imax {viewport.i_max!r}"
        f" --width {viewport.image_width} --height {viewport.image_height}"
        f" -i {config.budget.max_iterations} -f {config.budget.colour_factor!r}"
        f" -t {config.threads}"
    )

    if config.drop_remainder:
        args += " --drop-remainder"

    return args


def build_parser():
    parser = argparse.ArgumentParser(description="Render the Mandelbrot set in grayscale")
    parser.add_argument(
        "-i",
        "--iterations",
        type=int,
        help="The number of iterations done for each pixel.",
        default=DEFAULT_ITERATIONS,
    )
    parser.add_argument(
        "-f",
        "--colour-factor",
        type=float,
        help="How many iterations it takes to reach full brightness; higher is darker.",
        default=DEFAULT_COLOUR_FACTOR,
    )
    parser.add_argument(
        "-t",
        "--threads",
        type=int,
        help="The number of worker threads.",
        default=DEFAULT_THREADS,
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("-rmin", "--real-min", type=float, default=DEFAULT_REAL_MIN)
    parser.add_argument("-rmax", "--real-max", type=float, default=DEFAULT_REAL_MAX)
    parser.add_argument(
        "-ic",
        "--imag-center",
        type=float,
        help="The imaginary coordinate the image is centred on; the range follows the aspect ratio.",
        default=DEFAULT_IMAG_CENTER,
    )
    parser.add_argument(
        "-imin",
        "--imag-min",
        type=float,
        help="Explicit imaginary minimum, overrides --imag-center (requires --imag-max).",
    )
    parser.add_argument(
        "-imax",
        "--imag-max",
        type=float,
        help="Explicit imaginary maximum, overrides --imag-center (requires --imag-min).",
    )
    parser.add_argument(
        "--drop-remainder",
        action="store_true",
        help="Give every thread the same number of rows, leaving any leftover rows black.",
    )
    parser.add_argument(
        "--no-display", action="store_true", help="Render without opening a window."
    )
    parser.add_argument("-log", "--log-level", choices=["debug", "info", "warning"], default="info")
    return parser


def config_from_args(args) -> MandelbrotConfig:
    if (args.imag_min is None) != (args.imag_max is None):
        raise ConfigError("--imag-min and --imag-max must be given together")

    if args.imag_min is None:
        viewport = Viewport.from_center(
            args.real_min, args.real_max, args.imag_center, args.width, args.height
        )
    else:
        viewport = Viewport(
            args.real_min, args.real_max, args.imag_min, args.imag_max, args.width, args.height
        )

    return MandelbrotConfig(
        viewport=viewport,
        budget=IterationBudget(args.iterations, args.colour_factor),
        threads=args.threads,
        drop_remainder=args.drop_remainder,
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    my_logger.setLevel(args.log_level.upper())

    try:
        config = config_from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    my_logger.debug(f"rendering with: {make_cli_args(config)}")
    pixels = mandelbrot(config)

    if args.no_display:
        return

    # imported late so rendering works without a display
    from glowbrot.ui import tkinter_ui

    tkinter_ui.run(pixels)


if __name__ == "__main__":
    main()
