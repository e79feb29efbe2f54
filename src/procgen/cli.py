"""Command-line interface for map generation."""

import argparse
import logging
import sys
import time
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from .config import MapConfig


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog for console output."""
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a procedural tile map and print it"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of a map TOML config (default: noise bands only)",
    )
    parser.add_argument("--width", type=int, default=None, help="Map width")
    parser.add_argument("--height", type=int, default=None, help="Map height")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--frequency", type=float, default=None, help="Noise frequency"
    )
    parser.add_argument("--octaves", type=int, default=None, help="Noise octaves")
    parser.add_argument(
        "--redistribution",
        type=float,
        default=None,
        help="Noise redistribution exponent",
    )
    parser.add_argument(
        "--color", action="store_true", help="Color tiles with ANSI escapes"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for map generation."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    # Import here to avoid slow startup for --help
    from .config import MapConfig, NoiseLayerConfig, find_config, load_config
    from .exceptions import ConfigError
    from .pipeline import generate_map
    from .render import render_grid

    try:
        if args.config:
            config = load_config(find_config(args.config))
        else:
            config = MapConfig(noise=NoiseLayerConfig())
        config = _apply_overrides(config, args)
    except (FileNotFoundError, ConfigError) as e:
        parser.error(str(e))

    start_time = time.time()
    try:
        result = generate_map(config)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    gen_time = time.time() - start_time

    sys.stdout.write(render_grid(result.grid, colors=args.color))
    structlog.get_logger().info(
        "cli_done",
        seed=result.seed,
        rooms=len(result.rooms),
        seconds=round(gen_time, 3),
    )
    return 0 if result.validation.passed else 1


def _apply_overrides(config: "MapConfig", args: argparse.Namespace) -> "MapConfig":
    """Return a validated copy of config with command-line overrides applied."""
    from .config import NoiseLayerConfig, parse_config

    data = config.model_dump()
    for key in ("width", "height", "seed"):
        value = getattr(args, key)
        if value is not None:
            data[key] = value

    noise_overrides = {
        key: getattr(args, key)
        for key in ("frequency", "octaves", "redistribution")
        if getattr(args, key) is not None
    }
    if noise_overrides:
        if data.get("noise") is None:
            data["noise"] = NoiseLayerConfig().model_dump()
        data["noise"]["options"].update(noise_overrides)

    return parse_config(data)


if __name__ == "__main__":
    sys.exit(main())
