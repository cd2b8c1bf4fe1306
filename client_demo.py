#!/usr/bin/env python3
#
# PROJECT: braille-cli-graphics
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import argparse
import logging
import sys

from braille_cli_graphics.config import RenderConfig
from braille_cli_graphics.demo import main as demo_main


def parse_args(argv=None):
    """CLI argument parser for the braille graphics demo."""
    epilog = """\
examples:
  %(prog)s                                  Curves, boxes and lines only
  %(prog)s logo.bmp                         Also draw a 24-bit bitmap
  %(prog)s logo.bmp --frame-delay 0.05      Slower animation
  %(prog)s --amplitude 0.3 --rate 0.02      Wider, faster curve swing
  %(prog)s --log-level DEBUG --log-file demo.log
"""
    parser = argparse.ArgumentParser(
        description="Braille CLI Graphics Demo",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("bitmap", nargs='?',
                        help="Path to a 24-bit uncompressed .bmp file")
    parser.add_argument("--frame-delay", type=float, default=0.02,
                        help="Seconds to wait between frames (default: 0.02)")
    parser.add_argument("--amplitude", type=float, default=0.1,
                        help="Initial quadratic coefficient of the curves (default: 0.1)")
    parser.add_argument("--rate", type=float, default=0.01,
                        help="Coefficient change per frame (default: 0.01)")
    parser.add_argument("--limit", type=float, default=0.5,
                        help="Coefficient magnitude where the swing reverses (default: 0.5)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: WARNING)")
    parser.add_argument("--log-file",
                        help="Write logs to this file instead of stderr")
    return parser.parse_args(argv)


def build_config(args) -> RenderConfig:
    config = RenderConfig.detect_terminal()
    config.bitmap_path = args.bitmap
    config.frame_delay = max(0.0, args.frame_delay)
    config.curve_amplitude = args.amplitude
    config.curve_rate = args.rate
    config.amplitude_limit = abs(args.limit)
    return config


def setup_logging(args):
    # Frames go to stdout, so logs must never share it
    target = {"filename": args.log_file} if args.log_file else {"stream": sys.stderr}
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        **target
    )


def cli(argv=None):
    args = parse_args(argv)
    setup_logging(args)
    config = build_config(args)
    try:
        curses.wrapper(lambda s: demo_main(s, config))
    except KeyboardInterrupt:
        pass
    except Exception:
        logging.getLogger(__name__).exception("Demo aborted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
