#!/usr/bin/env python3
"""
Pong - Main Entry Point

Two players share one keyboard: W/S move the left paddle, Up/Down the
right one. SPACE starts a match and serves the next round.
"""

import argparse
from typing import List, Optional

from app import AppShell
from config import Config
from debug import DebugLogger
from input_handler import InputHandler
from renderer import PygameSurface, Surface


def run_game(
    config: Config,
    debug: bool = False,
    log_file: Optional[str] = None,
    surface: Optional[Surface] = None,
    input_handler: Optional[InputHandler] = None,
) -> Optional[AppShell]:
    """Open the window and run the frame loop until it is closed.

    Each iteration samples input once, runs one frame of the app and
    waits for the next frame exactly once. The elapsed time returned by
    the surface is fed into the next frame's input.

    Returns:
        The AppShell after the loop ends, or None if pygame is missing
    """
    logger = None
    if debug:
        logger = DebugLogger()
        logger.print_live = True

    try:
        if surface is None:
            surface = PygameSurface(config)
        if input_handler is None:
            input_handler = InputHandler()
    except ImportError as e:
        print(f"Error: {e}")
        print("Install pygame with: pip install pygame")
        return None

    shell = AppShell(config, logger=logger)

    print("\n=== Pong ===")
    print("Left:  W / S")
    print("Right: Up / Down")
    print("SPACE - Start / next round")
    print("ESC   - Leave match / quit")
    print("============\n")

    elapsed = 0.0
    try:
        while input_handler.running and shell.running:
            input_handler.process_events()
            frame_input = input_handler.sample(elapsed)
            shell.tick(frame_input, surface)
            elapsed = surface.next_frame()
    finally:
        if shell.match is not None:
            shell.end_match()
        surface.close()

    if debug:
        shell.stats.print_summary()
        logger.print_summary()
        if log_file:
            logger.export_json(log_file)

    return shell


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pong - two players, one keyboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default 800x600 window
  python main.py

  # Faster ball, symmetric wall bounce, event log in the console
  python main.py --ball-speed 450 --symmetric-walls --debug

  # Keep the event log for later inspection
  python main.py --debug --log-file events.json
""",
    )
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        metavar="PX",
        help=f"Initial window width (default: {Config().viewport_width})",
    )
    parser.add_argument(
        "--height",
        type=_positive_int,
        default=None,
        metavar="PX",
        help=f"Initial window height (default: {Config().viewport_height})",
    )
    parser.add_argument(
        "--fps",
        type=_positive_int,
        default=None,
        metavar="FPS",
        help=f"Target frames per second (default: {Config().fps})",
    )
    parser.add_argument(
        "--ball-speed",
        type=_positive_float,
        default=None,
        metavar="SPEED",
        help=f"Ball speed per axis in units/second (default: {Config().ball_speed_x})",
    )
    parser.add_argument(
        "--paddle-speed",
        type=_positive_float,
        default=None,
        metavar="SPEED",
        help=f"Paddle speed in units/second (default: {Config().paddle_speed})",
    )
    parser.add_argument(
        "--symmetric-walls",
        action="store_true",
        help="Bounce off the top wall at y <= radius instead of y <= 0",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print game events as they happen and a summary on exit",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        metavar="PATH",
        help="With --debug, write every logged event to this JSON file on exit",
    )
    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Map parsed arguments onto a Config."""
    config_kwargs = {}
    if args.width is not None:
        config_kwargs["viewport_width"] = args.width
    if args.height is not None:
        config_kwargs["viewport_height"] = args.height
    if args.fps is not None:
        config_kwargs["fps"] = args.fps
    if args.ball_speed is not None:
        config_kwargs["ball_speed_x"] = args.ball_speed
        config_kwargs["ball_speed_y"] = args.ball_speed
    if args.paddle_speed is not None:
        config_kwargs["paddle_speed"] = args.paddle_speed
    if args.symmetric_walls:
        config_kwargs["symmetric_walls"] = True
    return Config(**config_kwargs)


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    run_game(build_config(args), debug=args.debug, log_file=args.log_file)


if __name__ == "__main__":
    main()
