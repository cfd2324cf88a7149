"""
Comparison rendering: numeric value extraction, per-row winner highlighting and
summary-card winner labels. Pure functions; templates only read the output.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from catalog import SPEC_TOOLTIPS
from schemas import NOT_AVAILABLE, ComparisonResult

UNORDERABLE = -1.0

RowWinner = Enum("RowWinner", "NONE SLOT1 SLOT2")

STYLE_WINNER = "winner"
STYLE_LOSER = "loser"
STYLE_NEUTRAL = "neutral"

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+")


@dataclass
class SpecRowDef:
    key: str
    label: str
    higher_is_better: bool | None


# Display order and polarity; None means non-ordinal (never highlighted)
CPU_ROWS = (
    SpecRowDef("cores", "Cores", True),
    SpecRowDef("threads", "Threads", True),
    SpecRowDef("boostClock", "Boost Clock", True),
    SpecRowDef("baseClock", "Base Clock", True),
    SpecRowDef("l3Cache", "L3 Cache", True),
    SpecRowDef("cinebenchR23MultiCore", "Cinebench R23 Multi-Core", True),
    SpecRowDef("cinebenchR23SingleCore", "Cinebench R23 Single-Core", True),
    SpecRowDef("tdp", "TDP", False),
    SpecRowDef("idlePower", "Idle Power", False),
    SpecRowDef("peakPower", "Peak Power", False),
    SpecRowDef("socket", "Socket", None),
    SpecRowDef("integratedGraphics", "Integrated Graphics", None),
    SpecRowDef("releaseDate", "Release Date", None),
)

GPU_ROWS = (
    SpecRowDef("vram", "VRAM", True),
    SpecRowDef("memoryType", "Memory Type", None),
    SpecRowDef("boostClock", "Boost Clock", True),
    SpecRowDef("timeSpyGraphicsScore", "3DMark Time Spy Graphics", True),
    SpecRowDef("portRoyalRayTracingScore", "3DMark Port Royal Ray Tracing", True),
    SpecRowDef("tdp", "TDP", False),
    SpecRowDef("idlePower", "Idle Power", False),
    SpecRowDef("peakPower", "Peak Power", False),
    SpecRowDef("architecture", "Architecture", None),
    SpecRowDef("releaseDate", "Release Date", None),
)

ROWS = {"cpu": CPU_ROWS, "gpu": GPU_ROWS}


def numeric_value(value: Any) -> float:
    """
    Magnitude of a spec value, ignoring units: 128 -> 128, "5.7 GHz" -> 5.7,
    "1,234" -> 1234. Returns -1 for N/A, empty, None or text without digits.
    """
    if value is None or isinstance(value, bool):
        return UNORDERABLE
    if isinstance(value, (int, float)):
        # NaN and Infinity decode from free-text replies but have no order
        return float(value) if math.isfinite(value) else UNORDERABLE
    if not isinstance(value, str):
        return UNORDERABLE
    if not value or value == NOT_AVAILABLE:
        return UNORDERABLE
    match = _NUMBER_RE.search(value.replace(",", ""))
    return float(match.group(0)) if match else UNORDERABLE


def row_winner(value1: Any, value2: Any, higher_is_better: bool | None) -> RowWinner:
    if higher_is_better is None:
        return RowWinner.NONE
    n1 = numeric_value(value1)
    n2 = numeric_value(value2)
    if n1 == UNORDERABLE or n2 == UNORDERABLE or n1 == n2:
        return RowWinner.NONE
    slot1_better = n1 > n2 if higher_is_better else n1 < n2
    return RowWinner.SLOT1 if slot1_better else RowWinner.SLOT2


def slot_styles(winner: RowWinner) -> tuple[str, str]:
    if winner == RowWinner.SLOT1:
        return STYLE_WINNER, STYLE_LOSER
    if winner == RowWinner.SLOT2:
        return STYLE_LOSER, STYLE_WINNER
    return STYLE_NEUTRAL, STYLE_NEUTRAL


def summary_winner_label(winner: str, name1: str, name2: str) -> str:
    # Values are checked against {kind}1/{kind}2/tie at parse time
    text = (winner or "").lower()
    if "1" in text:
        return name1
    if "2" in text:
        return name2
    return "Tie"


@dataclass
class RenderedRow:
    key: str
    label: str
    tooltip: str
    value1: Any
    value2: Any
    winner: RowWinner
    style1: str
    style2: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "value1": self.value1,
            "value2": self.value2,
            "winner": self.winner.name.lower(),
            "style1": self.style1,
            "style2": self.style2,
        }


@dataclass
class SummaryCard:
    title: str
    label: str

    @property
    def is_tie(self) -> bool:
        return self.label == "Tie"

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "label": self.label, "is_tie": self.is_tie}


@dataclass
class RenderedComparison:
    kind: str
    name1: str
    name2: str
    rows: list[RenderedRow]
    cards: list[SummaryCard]
    recommendation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "name1": self.name1,
            "name2": self.name2,
            "rows": [r.to_dict() for r in self.rows],
            "cards": [c.to_dict() for c in self.cards],
            "recommendation": self.recommendation,
        }


def render_row(definition: SpecRowDef, value1: Any, value2: Any) -> RenderedRow:
    winner = row_winner(value1, value2, definition.higher_is_better)
    style1, style2 = slot_styles(winner)
    return RenderedRow(
        key=definition.key,
        label=definition.label,
        tooltip=SPEC_TOOLTIPS.get(definition.key, ""),
        value1=value1,
        value2=value2,
        winner=winner,
        style1=style1,
        style2=style2,
    )


def render_comparison(result: ComparisonResult) -> RenderedComparison:
    name1, name2 = result.slot1.model, result.slot2.model
    rows = [render_row(d, result.slot1.get(d.key), result.slot2.get(d.key)) for d in ROWS[result.kind]]
    summary = result.summary
    cards = [
        SummaryCard("Performance Winner", summary_winner_label(summary.performance_winner, name1, name2)),
        SummaryCard("Gaming Winner", summary_winner_label(summary.gaming_winner, name1, name2)),
        SummaryCard("Best Value", summary_winner_label(summary.value_winner, name1, name2)),
    ]
    return RenderedComparison(
        kind=result.kind,
        name1=name1,
        name2=name2,
        rows=rows,
        cards=cards,
        recommendation=summary.overall_recommendation,
    )
