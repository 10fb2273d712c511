import json
import pytest

WEEK = ["a", "b", "c", "d", "e", "f", "g"]


@pytest.mark.contract
@pytest.mark.parametrize(
    "args,expect_code,expected",
    [
        (WEEK, 0, "https://player.vimeo.com/video/a?autoplay=1&"),
        (WEEK + ["-g", "3"], 0, "https://player.vimeo.com/video/d?autoplay=1&"),
        (WEEK + ["-g", "STATIC", "--no-autoplay"], 0, "https://player.vimeo.com/video/a?autoplay=0&"),
        (WEEK + ["-g", "4", "-o", "id"], 0, "e"),
    ],
)
def test_cli_basic_args(run_cli, args, expect_code, expected):
    code, out, err = run_cli(args)
    assert code == expect_code
    assert out.strip() == expected


@pytest.mark.contract
def test_cli_random_is_member(run_cli):
    code, out, err = run_cli(WEEK + ["-g", "random", "-o", "id"])
    assert code == 0
    assert out.strip() in WEEK


@pytest.mark.contract
def test_cli_html_bootstrap4(run_cli):
    code, out, err = run_cli(WEEK + ["-g", "2", "-r", "16by9", "-o", "html"])
    assert code == 0
    assert "embed-responsive-16by9" in out
    assert "src='https://player.vimeo.com/video/c?autoplay=1&'" in out


@pytest.mark.contract
def test_cli_html_bootstrap5(run_cli):
    code, out, err = run_cli(WEEK + ["-f", "bootstrap5", "-o", "html"])
    assert code == 0
    assert out.startswith("<div class='ratio ratio-16x9'>")


@pytest.mark.contract
def test_cli_json_format(run_cli):
    code, out, err = run_cli(WEEK + ["-g", "1", "--format", "json"])
    assert code == 0
    data = json.loads(out.strip().splitlines()[-1])
    assert data["generator"] == "1"
    assert data["videoId"] == "b"
    assert data["url"] == "https://player.vimeo.com/video/b?autoplay=1&"
    assert "embed-responsive-16by9" in data["html"]


@pytest.mark.contract
@pytest.mark.parametrize(
    "args,message",
    [
        (WEEK + ["-g", "biweekly"], "biweekly"),
        (WEEK + ["-g", "9"], "out of range"),
        (WEEK + ["-g", "²"], "Unsupported generator"),
        (WEEK + ["-r", "wide", "-o", "html"], "wide"),
        (WEEK + ["-r", "wide", "--format", "json"], "wide"),
    ],
)
def test_cli_selection_errors(run_cli, args, message):
    code, out, err = run_cli(args)
    assert code == 1
    assert out == ""
    assert message in err


@pytest.mark.contract
@pytest.mark.parametrize(
    "args",
    [
        [],
        WEEK + ["-f", "bulma"],
        WEEK + ["-o", "xml"],
    ],
)
def test_cli_usage_errors(run_cli, args):
    code, out, err = run_cli(args)
    assert code == 2


@pytest.mark.contract
def test_cli_missing_explicit_config(run_cli, tmp_path):
    code, out, err = run_cli(["-c", str(tmp_path / "missing.json")])
    assert code == 1
    assert "not found" in err


@pytest.mark.contract
def test_cli_verbose_summary(run_cli):
    code, out, err = run_cli(WEEK + ["-g", "static", "-v"])
    assert code == 0
    assert out.strip() == "https://player.vimeo.com/video/a?autoplay=1&"
    assert "generator" in err


@pytest.mark.contract
@pytest.mark.parametrize("output,expected", [("url", "https://player.vimeo.com/video/b?autoplay=1&"), ("id", "b")])
def test_cli_ratio_ignored_without_html(run_cli, output, expected):
    code, out, err = run_cli(WEEK + ["-g", "1", "-r", "wide", "-o", output])
    assert code == 0
    assert out.strip() == expected
