"""
Unit tests for numeric comparison, row winners and summary labels.
"""

import json

import pytest

from comparator.response_parser import parse
from renderer import (
    CPU_ROWS,
    GPU_ROWS,
    STYLE_LOSER,
    STYLE_NEUTRAL,
    STYLE_WINNER,
    RowWinner,
    numeric_value,
    render_comparison,
    row_winner,
    summary_winner_label,
)
from schemas import CPU_FIELDS, GPU_FIELDS


class TestNumericValue:

    @pytest.mark.parametrize("value,expected", [
        ("N/A", -1),
        (None, -1),
        ("", -1),
        ("5.7 GHz", 5.7),
        ("32MB", 32),
        ("1,234", 1234),
        (128, 128),
        (3.5, 3.5),
        ("no digits here", -1),
        ("Up to 2520 MHz", 2520),
        ("40,100 pts", 40100),
        (float("nan"), -1),
        (float("inf"), -1),
    ])
    def test_values(self, value, expected):
        assert numeric_value(value) == expected

    def test_only_first_number_used(self):
        assert numeric_value("16 GB (2x8)") == 16

    def test_at_most_one_decimal_point(self):
        assert numeric_value("1.2.3") == 1.2


class TestRowWinner:

    @pytest.mark.parametrize("a,b", [
        (28, 16),
        ("5.7 GHz", "6.0 GHz"),
        ("1,234", "999"),
        ("32MB", 64),
    ])
    def test_swapping_arguments_swaps_winner(self, a, b):
        forward = row_winner(a, b, True)
        backward = row_winner(b, a, True)
        assert forward != RowWinner.NONE
        assert {forward, backward} == {RowWinner.SLOT1, RowWinner.SLOT2}

    @pytest.mark.parametrize("value", [16, "5.7 GHz", "1,234"])
    def test_equal_values_tie(self, value):
        assert row_winner(value, value, True) == RowWinner.NONE
        assert row_winner(value, value, False) == RowWinner.NONE

    def test_units_ignored_for_equality(self):
        assert row_winner("125W", "125 W", False) == RowWinner.NONE

    def test_higher_is_better(self):
        assert row_winner(28, 16, True) == RowWinner.SLOT1
        assert row_winner(16, 28, True) == RowWinner.SLOT2

    def test_lower_is_better(self):
        assert row_winner("125W", "170W", False) == RowWinner.SLOT1
        assert row_winner("253W", "230W", False) == RowWinner.SLOT2

    @pytest.mark.parametrize("a,b", [(28, 16), ("AM5", "LGA 1700"), ("N/A", 4), (1, 1)])
    def test_non_ordinal_always_none(self, a, b):
        assert row_winner(a, b, None) == RowWinner.NONE

    def test_unorderable_value_is_none(self):
        assert row_winner("N/A", "170W", False) == RowWinner.NONE
        assert row_winner(24, "unknown", True) == RowWinner.NONE

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_value_is_none(self, bad):
        assert row_winner(bad, 16, True) == RowWinner.NONE
        assert row_winner(16, bad, True) == RowWinner.NONE
        assert row_winner(bad, 16, False) == RowWinner.NONE

    def test_nan_from_reply_is_neutral(self, cpu_payload):
        raw = json.dumps(cpu_payload).replace('"cores": 24', '"cores": NaN')
        rows = {r.key: r for r in render_comparison(parse(raw, "cpu")).rows}
        assert rows["cores"].winner == RowWinner.NONE
        assert (rows["cores"].style1, rows["cores"].style2) == (STYLE_NEUTRAL, STYLE_NEUTRAL)


class TestSummaryWinnerLabel:

    def test_slot1(self):
        assert summary_winner_label("cpu1", "Ryzen 5", "i5") == "Ryzen 5"

    def test_slot2(self):
        assert summary_winner_label("gpu2", "A", "B") == "B"

    def test_tie(self):
        assert summary_winner_label("tie", "A", "B") == "Tie"


class TestRowTables:

    def test_cpu_rows_cover_fields(self):
        assert {r.key for r in CPU_ROWS} == set(CPU_FIELDS) - {"model"}

    def test_gpu_rows_cover_fields(self):
        assert {r.key for r in GPU_ROWS} == set(GPU_FIELDS) - {"model"}

    def test_polarity(self):
        polarity = {r.key: r.higher_is_better for r in CPU_ROWS + GPU_ROWS}
        for key in ("cores", "threads", "boostClock", "baseClock", "l3Cache", "vram",
                    "cinebenchR23MultiCore", "timeSpyGraphicsScore"):
            assert polarity[key] is True
        for key in ("tdp", "idlePower", "peakPower"):
            assert polarity[key] is False
        for key in ("socket", "architecture", "memoryType", "integratedGraphics", "releaseDate"):
            assert polarity[key] is None


class TestRenderComparison:

    def test_cpu_table(self, cpu_payload):
        rendered = render_comparison(parse(json.dumps(cpu_payload), "cpu"))
        rows = {r.key: r for r in rendered.rows}

        assert rendered.name1 == "Intel Core i9-14900K"
        assert rendered.name2 == "AMD Ryzen 9 7950X"
        assert (rows["cores"].style1, rows["cores"].style2) == (STYLE_WINNER, STYLE_LOSER)
        assert rows["threads"].winner == RowWinner.NONE
        assert (rows["l3Cache"].style1, rows["l3Cache"].style2) == (STYLE_LOSER, STYLE_WINNER)
        assert rows["tdp"].winner == RowWinner.SLOT1
        assert rows["idlePower"].winner == RowWinner.NONE
        assert (rows["socket"].style1, rows["socket"].style2) == (STYLE_NEUTRAL, STYLE_NEUTRAL)
        assert rows["cores"].tooltip

    def test_cards(self, cpu_payload):
        rendered = render_comparison(parse(json.dumps(cpu_payload), "cpu"))
        cards = {c.title: c for c in rendered.cards}
        assert cards["Performance Winner"].label == "Intel Core i9-14900K"
        assert cards["Best Value"].label == "AMD Ryzen 9 7950X"
        assert cards["Gaming Winner"].label == "Tie"
        assert cards["Gaming Winner"].is_tie
        assert rendered.recommendation.startswith("Both are flagship")

    def test_gpu_equal_vram_is_neutral(self, gpu_payload):
        rendered = render_comparison(parse(json.dumps(gpu_payload), "gpu"))
        rows = {r.key: r for r in rendered.rows}
        assert rows["vram"].winner == RowWinner.NONE
        assert rows["timeSpyGraphicsScore"].winner == RowWinner.SLOT1
        assert rows["tdp"].winner == RowWinner.SLOT2
        assert rendered.to_dict()["rows"][0]["winner"] == "none"
