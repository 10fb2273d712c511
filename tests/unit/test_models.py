import json
import pytest
from vimeo_balancer.models import (
    ByIndex,
    Framework,
    InvalidGeneratorError,
    Random,
    Selection,
    Static,
    UnsupportedFrameworkError,
    Weekday,
    parse_generator,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        (0, ByIndex(0)),
        (12, ByIndex(12)),
        ("3", ByIndex(3)),
        (" 4 ", ByIndex(4)),
        ("static", Static()),
        ("Random", Random()),
        ("WEEKDAY", Weekday()),
        (Weekday(), Weekday()),
    ],
)
def test_parse_generator(raw, expected):
    assert parse_generator(raw) == expected


@pytest.mark.parametrize("raw", ["biweekly", "-1", "1.0", "", [], False])
def test_parse_generator_invalid(raw):
    with pytest.raises(InvalidGeneratorError) as exc:
        parse_generator(raw)
    assert repr(raw) in str(exc.value)


@pytest.mark.parametrize("raw", ["²", "١٢", "7" * 5000])
def test_parse_generator_rejects_non_ascii_and_huge_digits(raw):
    with pytest.raises(InvalidGeneratorError):
        parse_generator(raw)


def test_invalid_generator_is_value_error():
    with pytest.raises(ValueError):
        parse_generator("monthly")


def test_negative_int_parses_as_index():
    # range checking happens at selection time
    assert parse_generator(-1) == ByIndex(-1)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("bootstrap4", Framework.BOOTSTRAP4),
        ("Bootstrap5", Framework.BOOTSTRAP5),
        (Framework.BOOTSTRAP5, Framework.BOOTSTRAP5),
    ],
)
def test_framework_parse(raw, expected):
    assert Framework.parse(raw) is expected


def test_framework_parse_unknown():
    with pytest.raises(UnsupportedFrameworkError) as exc:
        Framework.parse("tailwind")
    assert "tailwind" in str(exc.value)


def test_generator_display_names():
    assert [str(g) for g in (ByIndex(2), Static(), Random(), Weekday())] == [
        "2",
        "static",
        "random",
        "weekday",
    ]


def test_selection_to_json():
    s = Selection(generator="1", video_id="b", url="https://player.vimeo.com/video/b?autoplay=1&")
    data = json.loads(s.to_json())
    assert data == {
        "generator": "1",
        "videoId": "b",
        "url": "https://player.vimeo.com/video/b?autoplay=1&",
        "html": None,
    }
