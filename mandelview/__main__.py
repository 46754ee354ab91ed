"""
Allow running the package directly: python -m mandelview
"""
import logging
from argparse import ArgumentParser

from .app import run
from .config import load_config
from .errors import ConfigError
from .log import set_log_level


def build_parser():
    parser = ArgumentParser(prog='mandelview', description='Click-to-zoom Mandelbrot viewer.')

    parser.add_argument('--width', type=int, dest='width', metavar='WIDTH',
                        help='viewport width in pixels (default from settings.json)')
    parser.add_argument('--height', type=int, dest='height', metavar='HEIGHT',
                        help='viewport height in pixels (default from settings.json)')
    parser.add_argument('--max-iter', type=int, dest='max_iterations', metavar='MAX_ITER',
                        help='iteration budget per pixel')
    parser.add_argument('--workers', type=int, dest='workers', metavar='WORKERS',
                        help='number of parallel column bands (default: one per CPU)')
    parser.add_argument('--palette', type=str, dest='palette', metavar='PALETTE',
                        help='color palette name')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log every render pass')
    return parser


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)
    set_log_level(logging.DEBUG if opt.verbose else logging.INFO)

    try:
        config = load_config(
            width=opt.width,
            height=opt.height,
            max_iterations=opt.max_iterations,
            workers=opt.workers,
            palette=opt.palette,
        )
    except ConfigError as e:
        parser.error(str(e))
    run(config)


if __name__ == '__main__':
    main()
