"""Tests for configuration, colored log tags and the debug renderer."""

import contextlib
import io

import pytest

from bestpath import Config, KnownCell, TerrainType, Tile, fill_unknown_cells, normalize_known_cells, render_matrix
from bestpath.config import _env_flag
from bestpath.logging_utils import (
    Color,
    LOG_TAG_DISCOVERY,
    LOG_TAG_ERROR,
    colored,
    log_deterministic,
    log_discovery,
    log_error,
    log_info,
    log_success,
)


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), (" on ", True), ("no", False), ("", False)])
def test_env_flag_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("BESTPATH_TEST_FLAG", raw)
    assert _env_flag("BESTPATH_TEST_FLAG") is expected


def test_env_flag_default(monkeypatch):
    monkeypatch.delenv("BESTPATH_TEST_FLAG", raising=False)
    assert _env_flag("BESTPATH_TEST_FLAG") is False
    assert _env_flag("BESTPATH_TEST_FLAG", "true") is True


def test_validate_rejects_non_positive_impassable_cost(monkeypatch):
    Config.validate()
    monkeypatch.setattr(Config, "IMPASSABLE_COST", 0)
    with pytest.raises(ValueError):
        Config.validate()


def test_display_lists_settings(monkeypatch):
    monkeypatch.setattr(Config, "IMPASSABLE_COST", 42)
    text = Config.display()
    assert text.startswith("BestPath Configuration:")
    assert "Impassable cost: 42" in text
    assert "Debug planner:" in text


def test_impassable_cost_is_read_at_call_time(monkeypatch):
    monkeypatch.setattr(Config, "IMPASSABLE_COST", 777)
    assert Tile(tile_type=TerrainType.LAVA).cost == 777


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def test_colored_wraps_in_ansi_codes(monkeypatch):
    monkeypatch.delenv("BESTPATH_NO_COLOR", raising=False)
    text = colored("hello", Color.GREEN, bold=True)
    assert text.startswith(Color.BOLD.value + Color.GREEN.value)
    assert text.endswith(Color.RESET.value)


def test_no_color_env_disables_ansi(monkeypatch):
    monkeypatch.setenv("BESTPATH_NO_COLOR", "1")
    assert colored("hello", Color.RED) == "hello"


def test_log_helpers_prefix_tags(monkeypatch):
    monkeypatch.setenv("BESTPATH_NO_COLOR", "1")
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        log_deterministic("normalize")
        log_discovery("probe")
        log_error("oops")
        log_success("done")
        log_info("note")

    assert buf.getvalue().splitlines() == [
        "[•] normalize",
        f"{LOG_TAG_DISCOVERY} probe",
        f"{LOG_TAG_ERROR} oops",
        "[✓] done",
        "[i] note",
    ]


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------


def test_render_marks_estimates_and_overlays():
    known = [
        KnownCell(coordinate=(5, 5), tile=Tile(tile_type=TerrainType.GRASS)),
        KnownCell(coordinate=(5, 6), tile=Tile(tile_type=TerrainType.WALL)),
    ]
    grid = normalize_known_cells(known, targets=[(6, 6)], start=(5, 5))

    text = render_matrix(grid, marks={(6, 6): "X"})

    # Untouched pre-fill renders as lava flagged as not ground truth
    assert text.splitlines() == [
        ". #",
        "L?X?",
    ]


def test_render_custom_symbols():
    grid = normalize_known_cells(
        [KnownCell(coordinate=(0, 0), tile=Tile(tile_type=TerrainType.SAND))],
        targets=[(0, 0)],
        start=(0, 0),
    )
    assert render_matrix(grid, symbols={TerrainType.SAND: "s"}) == "s"


def test_colored_without_bold_uses_only_the_color(monkeypatch):
    monkeypatch.delenv("BESTPATH_NO_COLOR", raising=False)
    assert colored("x", Color.CYAN) == f"{Color.CYAN.value}x{Color.RESET.value}"


def test_render_after_fill_flags_estimates_but_not_discoveries():
    grid = normalize_known_cells(
        [KnownCell(coordinate=(0, 0), tile=Tile(tile_type=TerrainType.GRASS))],
        targets=[(0, 2)],
        start=(0, 0),
    )
    fill_unknown_cells(grid, lambda coordinates: {c: Tile(tile_type=TerrainType.SAND) for c in coordinates})

    # (0,1) is estimated from (0,0); (0,2) has no known neighbour and is discovered
    assert render_matrix(grid) == ". .?:"
