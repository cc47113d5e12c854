"""Tests for palette scoring."""

from chromalab.core.conversions import color_stop
from chromalab.core.scoring import score_palette
from chromalab.core.types import PaletteScore, PaletteSlot


def test_triadic_palette_is_balanced_and_accessible():
    score = score_palette(["#FF0000", "#00FF00", "#0000FF"])
    assert score.balance >= 90
    assert score.accessibility == 100
    assert score.uniqueness == 100
    mean = (score.balance + score.accessibility + score.harmony + score.uniqueness) / 4
    assert score.overall == round(mean)


def test_scores_stay_within_bounds():
    score = score_palette(["#3B82F6", "#10B981", "#F59E0B", "#EF4444", "#FAFAFA"])
    for value in score:
        assert 0 <= value <= 100


def test_duplicate_colors_are_not_unique():
    score = score_palette(["#3B82F6", "#3B82F6"])
    assert score.uniqueness == 0
    assert score.harmony == 100


def test_too_few_colors_scores_zero():
    assert score_palette(["#3B82F6"]) == PaletteScore(0, 0, 0, 0, 0)
    assert score_palette([]) == PaletteScore(0, 0, 0, 0, 0)


def test_unparsable_entries_are_skipped():
    assert score_palette(["#FF0000", "nope"]) == PaletteScore(0, 0, 0, 0, 0)
    assert score_palette(["#FF0000", "nope", "#0000FF"]) == score_palette(["#FF0000", "#0000FF"])


def test_accepts_stops_and_slots():
    hexes = ["#FF0000", "#00FF00", "#0000FF"]
    stops = [color_stop(h) for h in hexes]
    slots = [PaletteSlot(s, locked=True) for s in stops]
    assert score_palette(stops) == score_palette(hexes)
    assert score_palette(slots) == score_palette(hexes)


def test_accessibility_measures_each_color_on_its_best_side():
    # The better of white or black always clears sqrt(21):1, so even mid grays pass
    score = score_palette(["#777777", "#7A7A7A", "#767676"])
    assert score.accessibility == 100


def test_two_color_balance_ignores_order():
    assert score_palette(["#3B82F6", "#F59E0B"]).balance == score_palette(["#F59E0B", "#3B82F6"]).balance
