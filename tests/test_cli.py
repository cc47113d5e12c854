"""End-to-end tests for the chromalab command line."""

from chromalab import __version__
from chromalab.core import config as c


def test_version(run_cli):
    code, out, _ = run_cli("-v")
    assert code == 0
    assert __version__ in out


def test_inspector_json(run_cli_json):
    payload = run_cli_json("-H", "3b82f6", "-rgb", "--oklch", "-wcag")
    assert payload["hex"] == "#3B82F6"
    assert payload["rgb"] == [59, 130, 246]
    assert len(payload["oklch"]) == 3
    assert payload["wcag"]["white"]["level"] in ("AA", "AAA", "AA Large", "Fail")
    assert "hsl" not in payload


def test_inspector_all_flags(run_cli_json):
    payload = run_cli_json("-H", "#FF0000", "-all")
    for key in ("rgb", "hsl", "hsv", "cmyk", "oklab", "oklch", "luminance", "wcag", "apca", "p3"):
        assert key in payload
    assert payload["p3"]["wide_gamut"] is True


def test_inspector_requires_input(run_cli):
    code, _, err = run_cli("-rgb")
    assert code == 2
    assert "required" in err


def test_subcommand_must_come_first(run_cli):
    code, _, err = run_cli("-H", "#FF0000", "scale")
    assert code == 2
    assert "first argument" in err


def test_convert_json(run_cli_json):
    payload = run_cli_json("convert", "-v", "rgb(59, 130, 246)")
    assert set(payload) == set(c.CONVERT_FORMATS) | {"alpha"}
    assert payload["hex"] == "#3B82F6"
    assert payload["rgb"] == "rgb(59, 130, 246)"
    assert payload["alpha"] == 100


def test_convert_single_format_with_alpha(run_cli_json):
    payload = run_cli_json("convert", "-v", "#3B82F680", "-t", "HEX")
    assert payload == {"hex": "#3B82F6", "alpha": 50}


def test_convert_rejects_bad_value(run_cli):
    code, _, err = run_cli("convert", "-v", "blue-ish")
    assert code == 2
    assert "invalid color value" in err


def test_contrast_pair_with_fix(run_cli_json):
    payload = run_cli_json("contrast", "-fg", "#777777", "-bg", "#FFFFFF", "--fix")
    assert payload["wcag"]["level"] == "AA Large"
    assert payload["fix"]["direction"] == "darken"
    assert payload["fix"]["ratio"] >= 4.5


def test_contrast_against_white_and_black(run_cli_json):
    payload = run_cli_json("contrast", "-fg", "#000000")
    assert payload["wcag"]["white"]["ratio"] == 21.0
    assert payload["apca"]["white"]["lc"] > 100


def test_contrast_fix_without_background_warns(run_cli):
    code, _, err = run_cli("contrast", "-fg", "#777777", "--fix")
    assert code == 0
    assert "background" in err


def test_scale_json(run_cli_json):
    payload = run_cli_json("scale", "-H", "#3B82F6")
    assert payload["base"] == "#3B82F6"
    assert [s["step"] for s in payload["steps"]] == list(c.SCALE_STEPS)


def test_score_needs_two_colors(run_cli):
    code, _, err = run_cli("score", "-H", "#3B82F6")
    assert code == 2
    assert "at least 2" in err


def test_score_random_is_reproducible(run_cli_json):
    first = run_cli_json("score", "-r", "-c", "4", "-s", "7")
    second = run_cli_json("score", "-r", "-c", "4", "-s", "7")
    assert first == second
    assert len(first["colors"]) == 4


def test_utility_keep_locks_role(run_cli, run_cli_json):
    payload = run_cli_json("utility", "-H", "#3B82F6", "-k", "error=#FF00FF")
    assert payload["utility"]["error"]["hex"] == "#FF00FF"
    assert payload["utility"]["error"]["locked"] is True
    assert payload["utility"]["info"]["locked"] is False

    code, _, err = run_cli("utility", "-H", "#3B82F6", "-k", "sparkle=#FF00FF")
    assert code == 0
    assert "unknown utility role" in err


def test_vision_json(run_cli_json):
    payload = run_cli_json("vision", "-H", "#FF0000", "-p", "-a")
    assert set(payload["simulations"]) == {"protanopia", "achromatopsia"}
    gray = payload["simulations"]["achromatopsia"]["hex"]
    assert gray[1:3] == gray[3:5] == gray[5:7]


def test_vision_all_types(run_cli_json):
    payload = run_cli_json("vision", "-H", "#FF0000", "-all", "-i", "50")
    assert payload["intensity"] == 50
    assert set(payload["simulations"]) == {k for k in c.SIM_MATRICES if k != "normal"}


def test_gamut_json(run_cli_json):
    rows = run_cli_json("gamut", "-H", "#FF0000", "-H", "#808080")
    assert [r["wide_gamut"] for r in rows] == [True, False]
    assert rows[1]["expanded"] == "#808080"
    assert rows[0]["p3"].startswith("color(display-p3")


def test_gradient_json(run_cli_json):
    grad = run_cli_json("gradient", "-H", "#000000", "-H", "#FFFFFF", "-S", "3", "-cs", "srgb")
    assert grad == ["#000000", "#808080", "#FFFFFF"]


def test_help_full_lists_subcommands(run_cli):
    code, out, _ = run_cli("-hf")
    assert code == 0
    for name in ("chromalab convert", "chromalab gradient", "chromalab vision"):
        assert name in out
