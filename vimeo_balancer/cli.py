"""Command-line interface: pick a video and print its id, URL or embed HTML."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from rich import print as rprint
from rich.markup import escape
from .config import AppConfig, ConfigError, DEFAULT_CONFIG_PATH
from .embed import InvalidRatioError
from .logging_utils import get_logger, set_verbose
from .models import Framework, InvalidGeneratorError, UnsupportedFrameworkError
from .selector import VideoIndexError

SELECTION_ERRORS = (
    ConfigError,
    InvalidGeneratorError,
    InvalidRatioError,
    UnsupportedFrameworkError,
    VideoIndexError,
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Vimeo video selector / embed generator")
    p.add_argument(
        "videos",
        nargs="*",
        help="Vimeo video ids in slot order (overrides the config file list)",
    )
    p.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"JSON config file (default: {DEFAULT_CONFIG_PATH})",
    )
    p.add_argument(
        "-g",
        "--generator",
        default=None,
        help="Selection strategy: an index, 'static', 'random' or 'weekday'",
    )
    p.add_argument(
        "-r", "--ratio", default=None, help="Aspect ratio, e.g. 16by9 or 16x9"
    )
    p.add_argument(
        "-f",
        "--framework",
        choices=[f.value for f in Framework],
        default=None,
        help="Embed markup convention",
    )
    p.add_argument(
        "--no-autoplay",
        dest="autoplay",
        action="store_false",
        default=None,
        help="Disable autoplay in the player URL",
    )
    p.add_argument(
        "-o",
        "--output",
        choices=["id", "url", "html"],
        default="url",
        help="What to print (text format only)",
    )
    p.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Plain value or a JSON object with id, url and html",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def load_config(args: argparse.Namespace) -> AppConfig:
    path = args.config or DEFAULT_CONFIG_PATH
    config = AppConfig.from_file(path)
    if path.exists():
        get_logger().info("Loaded config from %s", path)
    elif args.config is not None:
        raise ConfigError(f"Config file not found: {path}")
    if args.videos:
        config.videos = list(args.videos)
    if args.autoplay is not None:
        config.autoplay = args.autoplay
    if args.generator is not None:
        config.generator = args.generator
    if args.ratio is not None:
        config.ratio = args.ratio
    if args.framework is not None:
        config.framework = args.framework
    return config


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)
    log = get_logger()

    try:
        config = load_config(args)
        if not config.videos:
            parser.error("no videos given; pass ids or a config file with 'videos'")
        selector = config.build_selector()
        # HTML (and so ratio/framework validation) only when it will be printed
        wants_html = args.format == "json" or args.output == "html"
        selection = selector.select(
            config.generator,
            ratio=config.ratio,
            framework=config.framework if wants_html else None,
        )
    except SELECTION_ERRORS as e:
        log.debug("Selection failed: %r", e)
        rprint(f"[bold red]Error:[/] {escape(str(e))}", file=sys.stderr)
        return 1

    if args.format == "json":
        # Raw JSON only so the output stays machine readable
        print(selection.to_json())
    elif args.output == "id":
        print(selection.video_id)
    elif args.output == "html":
        print(selection.html)
    else:
        print(selection.url)

    if args.verbose:
        rprint(
            f"[cyan]generator[/] {escape(selection.generator)} -> "
            f"[bold]{escape(selection.video_id)}[/] "
            f"({len(config.videos)} video(s), autoplay={config.autoplay})",
            file=sys.stderr,
        )
    return 0


def main() -> None:
    sys.exit(run_cli())


__all__ = ["build_parser", "run_cli", "main"]
