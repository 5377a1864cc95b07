"""Command line entry point: ``snowscape`` / ``python -m snowscape``."""

import argparse
import logging
from typing import List, Optional, Tuple

from snowscape.config import DEFAULT_LAYERS, LOG_LEVELS, SceneConfig
from snowscape.driver import run
from snowscape.layers import LAYER_REGISTRY
from snowscape.utils.log import configure_logging
from snowscape.utils.style import COLOR_SYSTEM_CHOICES


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = SceneConfig()
    parser = argparse.ArgumentParser(
        prog="snowscape",
        description="Falling snow and a decorated tree in your terminal.",
    )
    parser.add_argument(
        "--tick-ms", type=int, default=defaults.tick_ms, help="delay between frames"
    )
    parser.add_argument(
        "--snow-probability",
        type=float,
        default=defaults.snow_probability,
        help="chance of a new flake per column per frame",
    )
    parser.add_argument(
        "--ornament-probability",
        type=float,
        default=defaults.ornament_probability,
        help="chance of an ornament per leaf per frame",
    )
    parser.add_argument("--caption", default=defaults.caption, help="text under the tree")
    parser.add_argument(
        "--layers",
        nargs="+",
        choices=sorted(LAYER_REGISTRY),
        default=list(DEFAULT_LAYERS),
        help="layers front to back",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--color-system", choices=COLOR_SYSTEM_CHOICES, default=defaults.color_system
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=defaults.log_level,
    )
    parser.add_argument("--log-file", default=None, help="log to this file instead of stderr")
    parser.add_argument(
        "--ticks", type=int, default=None, help="stop after this many frames"
    )
    return parser


def parse_config(
    argv: Optional[List[str]] = None,
    parser: Optional[argparse.ArgumentParser] = None,
) -> Tuple[SceneConfig, Optional[int]]:
    """Parse ``argv`` into a validated config and an optional frame limit."""
    parser = parser or build_parser()
    args = parser.parse_args(argv)
    config = SceneConfig(
        tick_ms=args.tick_ms,
        snow_probability=args.snow_probability,
        ornament_probability=args.ornament_probability,
        caption=args.caption,
        layers=tuple(args.layers),
        seed=args.seed,
        color_system=args.color_system,
        log_level=args.log_level,
        log_file=args.log_file,
    )
    try:
        config.validate()
    except ValueError as exc:
        parser.error(str(exc))
    if args.ticks is not None and args.ticks < 0:
        parser.error("--ticks must not be negative")
    return config, args.ticks


def main(argv: Optional[List[str]] = None) -> int:
    config, ticks = parse_config(argv)
    configure_logging(config.log_level, config.log_file)
    try:
        run(config, ticks=ticks)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0
