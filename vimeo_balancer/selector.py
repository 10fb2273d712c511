"""Video selection and Vimeo player URL building."""

from __future__ import annotations

import random
from datetime import datetime
from typing import Any, Callable, Iterable, List, Optional, Protocol
from urllib.parse import quote

from .embed import render_embed
from .logging_utils import get_logger
from .models import ByIndex, Framework, Random, Selection, Static, Weekday, parse_generator

PLAYER_URL = "https://player.vimeo.com/video/{video_id}"

_DEFAULT_RNG = random.Random()


class VideoIndexError(IndexError):
    pass


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


Clock = Callable[[], datetime]


class VideoSelector:
    """Picks a video id from an ordered list and formats it for embedding.

    Index 0 is the "static" video; indices 0-6 double as weekday slots
    (0=Sunday ... 6=Saturday) for the weekday strategy.
    """

    def __init__(
        self,
        videos: Iterable[Any],
        autoplay: bool = True,
        rng: Optional[RandomSource] = None,
        clock: Optional[Clock] = None,
    ):
        self.videos: List[str] = [str(v) for v in videos]
        self.autoplay = autoplay
        self._rng = rng or _DEFAULT_RNG
        self._clock = clock or datetime.now
        self._log = get_logger()

    def select_by_index(self, index: int) -> str:
        if not 0 <= index < len(self.videos):
            raise VideoIndexError(
                f"Video index {index} out of range for {len(self.videos)} video(s)"
            )
        return self.videos[index]

    def select_static(self) -> str:
        return self.select_by_index(0)

    def select_random(self) -> str:
        if not self.videos:
            raise VideoIndexError("Cannot pick a random video from an empty list")
        return self.select_by_index(self._rng.randint(0, len(self.videos) - 1))

    def current_weekday(self) -> int:
        # isoweekday: Monday=1 ... Sunday=7
        return self._clock().isoweekday() % 7

    def select_by_weekday(self) -> str:
        return self.select_by_index(self.current_weekday())

    def get_video_id(self, generator: Any = 0) -> str:
        gen = parse_generator(generator)
        if isinstance(gen, ByIndex):
            video_id = self.select_by_index(gen.index)
        elif isinstance(gen, Static):
            video_id = self.select_static()
        elif isinstance(gen, Random):
            video_id = self.select_random()
        elif isinstance(gen, Weekday):
            video_id = self.select_by_weekday()
        else:  # pragma: no cover - parse_generator only yields the variants above
            raise TypeError(f"Unhandled generator variant: {gen!r}")
        self._log.debug("Generator %s selected video %s", gen, video_id)
        return video_id

    def build_url(self, video_id: str) -> str:
        # "?", "=" and "&" pass through for unlisted ids such as "123?h=abc"
        url = PLAYER_URL.format(video_id=quote(str(video_id), safe="?=&"))
        # Trailing '&' is part of the established URL format
        return url + "?autoplay=%d&" % (1 if self.autoplay else 0)

    def get_url(self, generator: Any = 0) -> str:
        return self.build_url(self.get_video_id(generator))

    def get_html(
        self,
        generator: Any = 0,
        ratio: Optional[str] = None,
        framework: str | Framework = Framework.BOOTSTRAP4,
    ) -> str:
        """Render the responsive iframe embed for the selected video.

        ``ratio`` defaults to 16:9 in the framework's own notation.
        """
        fw = Framework.parse(framework)
        return render_embed(self.get_url(generator), ratio, fw, autoplay=self.autoplay)

    def select(
        self,
        generator: Any = 0,
        ratio: Optional[str] = None,
        framework: str | Framework | None = None,
    ) -> Selection:
        """Resolve the generator once and collect id, URL and optional HTML.

        HTML is only rendered when ``framework`` is given.
        """
        gen = parse_generator(generator)
        fw = Framework.parse(framework) if framework is not None else None
        video_id = self.get_video_id(gen)
        url = self.build_url(video_id)
        html = None
        if fw is not None:
            html = render_embed(url, ratio, fw, autoplay=self.autoplay)
        return Selection(generator=str(gen), video_id=video_id, url=url, html=html)


__all__ = ["VideoSelector", "VideoIndexError", "PLAYER_URL"]
