#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/cli.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 10
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import sys

from .actions import Marker, RenderMode
from .color import parse_hex_color
from .config import RenderConfig
from .shapes import SHAPES

logger = logging.getLogger(__name__)


def _hex_color(value):
    if parse_hex_color(value) is None:
        raise argparse.ArgumentTypeError(f"'{value}' is not a #RRGGBB color")
    return value


def _shape_list(value):
    names = [name.strip() for name in value.split(',') if name.strip()]
    unknown = [name for name in names if name not in SHAPES]
    if unknown or not names:
        raise argparse.ArgumentTypeError(
            f"unknown shape(s) {', '.join(unknown) or value!r}; "
            f"choose from {', '.join(SHAPES)}")
    return names


def build_parser():
    epilog = """\
controls:
  w a s d         walk forward / left / back / right
  space, k / j    move up / down
  arrow keys      look around
  F1-F6           marker: braille, dot, half block, block, bar, ascii
  F8 / F9         wireframe / ray-cast render mode
  Q               quit

examples:
  %(prog)s                                   All four shapes, braille
  %(prog)s --shapes tesseract --fov 70       One tesseract, narrower view
  %(prog)s --marker ascii --no-color         Plain ASCII output
  %(prog)s --raycast --log-file fps.log      Start in ray-cast mode with a debug log
"""
    parser = argparse.ArgumentParser(
        description="First-person terminal wireframe renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--shapes", type=_shape_list,
                        help=f"Comma separated shapes to show ({', '.join(SHAPES)}; default: all)")
    parser.add_argument("--fov", type=float, default=90.0,
                        help="Field of view in degrees (default: 90)")
    parser.add_argument("--near", type=float, default=0.1,
                        help="Near clipping plane distance (default: 0.1)")
    parser.add_argument("--far", type=float, default=100.0,
                        help="Far clipping plane distance (default: 100)")
    parser.add_argument("--move-speed", type=float, default=0.1,
                        help="World units per movement key press (default: 0.1)")
    parser.add_argument("--rotate-speed", type=float, default=5.0,
                        help="Degrees per look key press (default: 5)")
    parser.add_argument("--marker", choices=[m.value for m in Marker],
                        help="Line marker (default: braille on UTF-8 terminals, else ascii)")
    parser.add_argument("--raycast", action="store_true",
                        help="Start in ray-cast render mode")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--line-color", type=_hex_color, default="#FFFFFF",
                        help="Line color in hex #RRGGBB (default: #FFFFFF)")
    parser.add_argument("--bg-color", type=_hex_color, default="#0000AA",
                        help="Background color in hex #RRGGBB (default: #0000AA)")
    parser.add_argument("--no-hud", action="store_true",
                        help="Hide the camera status line")
    parser.add_argument("--poll-ms", type=int, default=500,
                        help="Longest wait for input before redrawing (default: 500)")
    parser.add_argument("--log-file",
                        help="Write log records to this file (the screen belongs to curses)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level for --log-file (default: WARNING)")
    return parser


def config_from_args(args) -> RenderConfig:
    """RenderConfig from terminal detection plus command line overrides."""
    detected = RenderConfig.detect_terminal()
    return RenderConfig(
        fov=args.fov,
        near_plane=args.near,
        far_plane=args.far,
        move_speed=args.move_speed,
        rotate_speed=args.rotate_speed,
        poll_timeout_ms=args.poll_ms,
        draw_marker=Marker(args.marker) if args.marker else detected.draw_marker,
        render_mode=RenderMode.RAYCAST if args.raycast else RenderMode.VERTEX,
        use_color=detected.use_color and not args.no_color,
        line_color=args.line_color,
        bg_color=args.bg_color,
        show_hud=not args.no_hud,
        shapes=args.shapes or list(SHAPES),
    )


def configure_logging(log_file, level):
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    logger.info("Configuration: %s", config)

    from .demo import main as demo_main
    try:
        curses.wrapper(lambda s: demo_main(s, config))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.exception("Renderer stopped")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
