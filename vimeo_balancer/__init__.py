"""Vimeo video selector package root.

Public surface kept intentionally small; internal modules may evolve.
"""

from .config import AppConfig
from .embed import InvalidRatioError, render_embed
from .models import (
    Framework,
    InvalidGeneratorError,
    Selection,
    UnsupportedFrameworkError,
    parse_generator,
)
from .selector import VideoIndexError, VideoSelector

__all__ = [
    "AppConfig",
    "Framework",
    "InvalidGeneratorError",
    "InvalidRatioError",
    "Selection",
    "UnsupportedFrameworkError",
    "VideoIndexError",
    "VideoSelector",
    "parse_generator",
    "render_embed",
]


def main():
    """Launch the Textual UI."""
    from .tui import PreviewApp

    app = PreviewApp()
    app.run()
