from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

# Selection strategies ("generators") as a closed set of variants


class InvalidGeneratorError(ValueError):
    pass


class UnsupportedFrameworkError(ValueError):
    pass


@dataclass(frozen=True)
class ByIndex:
    index: int

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True)
class Static:
    def __str__(self) -> str:
        return "static"


@dataclass(frozen=True)
class Random:
    def __str__(self) -> str:
        return "random"


@dataclass(frozen=True)
class Weekday:
    def __str__(self) -> str:
        return "weekday"


Generator = Union[ByIndex, Static, Random, Weekday]

KEYWORDS: Dict[str, Generator] = {
    "static": Static(),
    "random": Random(),
    "weekday": Weekday(),
}


def parse_generator(value: Any) -> Generator:
    """Resolve an external generator value into a variant.

    Accepts an int, a string of decimal digits (as typed on a command line),
    one of the keywords ``static``, ``random`` or ``weekday`` in any case,
    or an already parsed variant.
    """
    if isinstance(value, (ByIndex, Static, Random, Weekday)):
        return value
    # bool is an int subclass; True/False are not indices
    if isinstance(value, bool):
        raise InvalidGeneratorError(f"Unsupported generator: {value!r}")
    if isinstance(value, int):
        return ByIndex(value)
    if isinstance(value, str):
        token = value.strip()
        # isdigit alone accepts "²" and other non-ASCII digits
        if token.isascii() and token.isdigit():
            try:
                return ByIndex(int(token))
            except ValueError:
                # beyond the interpreter's int string-conversion limit
                raise InvalidGeneratorError(
                    f"Unsupported generator: index with {len(token)} digits"
                ) from None
        gen = KEYWORDS.get(token.lower())
        if gen is not None:
            return gen
    raise InvalidGeneratorError(
        f"Unsupported generator: {value!r} (expected an index, "
        + ", ".join(KEYWORDS)
        + ")"
    )


class Framework(str, Enum):
    BOOTSTRAP4 = "bootstrap4"
    BOOTSTRAP5 = "bootstrap5"

    @classmethod
    def parse(cls, value: Union[str, "Framework"]) -> "Framework":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise UnsupportedFrameworkError(
                f"Unsupported framework: {value!r} (expected one of {choices})"
            ) from None


@dataclass
class Selection:
    generator: str
    video_id: str
    url: str
    html: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        return {
            "generator": data["generator"],
            "videoId": data["video_id"],
            "url": data["url"],
            "html": data["html"],
        }

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)


__all__ = [
    "ByIndex",
    "Static",
    "Random",
    "Weekday",
    "Generator",
    "parse_generator",
    "Framework",
    "Selection",
    "InvalidGeneratorError",
    "UnsupportedFrameworkError",
]
