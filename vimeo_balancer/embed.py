from __future__ import annotations

import re
from typing import Dict, Optional

from .logging_utils import get_logger
from .models import Framework

RATIO_PATTERN = re.compile(r"^(\d+)\s*(by|x)\s*(\d+)$", re.IGNORECASE)

# Bootstrap 4 writes ratios as "16by9", Bootstrap 5 as "16x9"
RATIO_SEPARATOR: Dict[Framework, str] = {
    Framework.BOOTSTRAP4: "by",
    Framework.BOOTSTRAP5: "x",
}

CONTAINER_CLASS: Dict[Framework, str] = {
    Framework.BOOTSTRAP4: "embed-responsive embed-responsive-{ratio}",
    Framework.BOOTSTRAP5: "ratio ratio-{ratio}",
}

IFRAME_CLASS = "embed-responsive-item"
FULLSCREEN_ATTRS = "allowfullscreen webkitallowfullscreen mozallowfullscreen"


class InvalidRatioError(ValueError):
    pass


def normalize_ratio(ratio: Optional[str], framework: Framework) -> str:
    """Return ``ratio`` written in the framework's notation (16:9 if omitted)."""
    if ratio is None:
        ratio = "16by9"
    match = RATIO_PATTERN.match(ratio.strip())
    if not match:
        raise InvalidRatioError(
            f"Invalid aspect ratio {ratio!r}; expected e.g. 16by9 or 16x9"
        )
    width, _, height = match.groups()
    return f"{width}{RATIO_SEPARATOR[framework]}{height}"


def allow_attribute(autoplay: bool) -> str:
    features = ["fullscreen", "picture-in-picture"]
    if autoplay:
        features.insert(0, "autoplay")
    return "; ".join(features)


def render_embed(
    url: str,
    ratio: Optional[str] = None,
    framework: Framework = Framework.BOOTSTRAP4,
    autoplay: bool = True,
) -> str:
    framework = Framework.parse(framework)
    ratio_token = normalize_ratio(ratio, framework)
    container = CONTAINER_CLASS[framework].format(ratio=ratio_token)
    iframe = (
        f"<iframe class='{IFRAME_CLASS}' frameborder='0' src='{url}' "
        f"allow='{allow_attribute(autoplay)}' {FULLSCREEN_ATTRS}></iframe>"
    )
    get_logger().debug("Rendered %s embed (%s) for %s", framework.value, ratio_token, url)
    return f"<div class='{container}'>{iframe}</div>"


__all__ = [
    "render_embed",
    "normalize_ratio",
    "allow_attribute",
    "InvalidRatioError",
    "RATIO_PATTERN",
]
