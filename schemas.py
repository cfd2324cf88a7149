"""
Comparison response contract: field sets per hardware kind, the JSON schema sent
to the collaborator, the structural validator and the typed result objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

NOT_AVAILABLE = "N/A"

# -----------------------------------------------------------------------------
# Field sets (order is the order used in prompts)
# -----------------------------------------------------------------------------

CPU_FIELDS = (
    "model", "cores", "threads", "baseClock", "boostClock", "tdp", "idlePower",
    "peakPower", "l3Cache", "socket", "integratedGraphics", "releaseDate",
    "cinebenchR23MultiCore", "cinebenchR23SingleCore",
)

GPU_FIELDS = (
    "model", "vram", "memoryType", "boostClock", "tdp", "idlePower", "peakPower",
    "architecture", "releaseDate", "timeSpyGraphicsScore", "portRoyalRayTracingScore",
)

SPEC_FIELDS = {"cpu": CPU_FIELDS, "gpu": GPU_FIELDS}

# Fields the collaborator should report as plain numbers; everything else is a string
NUMERIC_FIELDS = {"cores", "threads"}

# Example values used in the prompt's field descriptions
FIELD_EXAMPLES = {
    "cpu": {
        "baseClock": "3.5 GHz",
        "boostClock": "5.7 GHz",
        "tdp": "125W",
        "idlePower": "8W",
        "peakPower": "253W",
        "l3Cache": "32MB",
    },
    "gpu": {
        "vram": "16 GB",
        "memoryType": "GDDR6X",
        "boostClock": "2520 MHz",
        "tdp": "320W",
        "idlePower": "15W",
        "peakPower": "315W",
    },
}

SUMMARY_FIELDS = ("performanceWinner", "valueWinner", "gamingWinner", "overallRecommendation")
WINNER_FIELDS = ("performanceWinner", "valueWinner", "gamingWinner")
TIE = "tie"


def slot_keys(kind: str) -> tuple[str, str]:
    return f"{kind}1", f"{kind}2"


def winner_values(kind: str) -> tuple[str, str, str]:
    """The only accepted values for a winner field."""
    return (*slot_keys(kind), TIE)


# -----------------------------------------------------------------------------
# Structured-output schema (JSON Schema, strict-mode compatible)
# -----------------------------------------------------------------------------

def _spec_object_schema(kind: str) -> dict[str, Any]:
    fields = SPEC_FIELDS[kind]
    properties: dict[str, Any] = {}
    for name in fields:
        if name == "model":
            properties[name] = {"type": "string"}
        elif name in NUMERIC_FIELDS:
            properties[name] = {"anyOf": [{"type": "number"}, {"type": "string"}]}
        else:
            properties[name] = {"type": "string"}
    return {
        "type": "object",
        "required": list(fields),
        "properties": properties,
        "additionalProperties": False,
    }


def comparison_schema(kind: str) -> dict[str, Any]:
    """JSON schema the collaborator's reply must conform to."""
    s1, s2 = slot_keys(kind)
    winner = {"type": "string", "enum": list(winner_values(kind))}
    return {
        "type": "object",
        "required": [s1, s2, "summary"],
        "properties": {
            s1: _spec_object_schema(kind),
            s2: _spec_object_schema(kind),
            "summary": {
                "type": "object",
                "required": list(SUMMARY_FIELDS),
                "properties": {
                    "performanceWinner": winner,
                    "valueWinner": winner,
                    "gamingWinner": winner,
                    "overallRecommendation": {"type": "string"},
                },
                "additionalProperties": False,
            },
        },
        "additionalProperties": False,
    }


def validate_comparison_output(data: Any, kind: str) -> tuple[bool, str]:
    """
    Structural check of a decoded reply. Returns (valid, error_message).
    Leaf fields inside a slot are not checked here; missing leaves become N/A.
    """
    if kind not in SPEC_FIELDS:
        return False, f"unknown hardware kind: {kind}"
    if not isinstance(data, dict):
        return False, "output must be a JSON object"
    for key in slot_keys(kind):
        if key not in data:
            return False, f"missing key: {key}"
        if not isinstance(data[key], dict):
            return False, f"{key} must be an object"
    summary = data.get("summary")
    if summary is None:
        return False, "missing key: summary"
    if not isinstance(summary, dict):
        return False, "summary must be an object"
    for key in SUMMARY_FIELDS:
        if key not in summary:
            return False, f"missing key: summary.{key}"
    allowed = winner_values(kind)
    for key in WINNER_FIELDS:
        if summary[key] not in allowed:
            return False, f"summary.{key} must be one of {allowed}, got {summary[key]!r}"
    if not isinstance(summary["overallRecommendation"], str):
        return False, "summary.overallRecommendation must be a string"
    return True, ""


# -----------------------------------------------------------------------------
# Typed result
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class HardwareSpec:
    kind: str
    values: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @property
    def model(self) -> str:
        return str(self.values.get("model") or NOT_AVAILABLE)

    def __getitem__(self, key: str) -> Any:
        return self.values[key]

    def get(self, key: str, default: Any = NOT_AVAILABLE) -> Any:
        return self.values.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        return dict(self.values)


@dataclass(frozen=True)
class Summary:
    performance_winner: str
    value_winner: str
    gaming_winner: str
    overall_recommendation: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Summary":
        return cls(
            performance_winner=data["performanceWinner"],
            value_winner=data["valueWinner"],
            gaming_winner=data["gamingWinner"],
            overall_recommendation=data["overallRecommendation"],
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "performanceWinner": self.performance_winner,
            "valueWinner": self.value_winner,
            "gamingWinner": self.gaming_winner,
            "overallRecommendation": self.overall_recommendation,
        }


@dataclass(frozen=True)
class ComparisonResult:
    kind: str
    slot1: HardwareSpec
    slot2: HardwareSpec
    summary: Summary

    def to_payload(self) -> dict[str, Any]:
        """Same shape as the collaborator reply ({kind}1, {kind}2, summary)."""
        s1, s2 = slot_keys(self.kind)
        return {
            s1: self.slot1.to_dict(),
            s2: self.slot2.to_dict(),
            "summary": self.summary.to_dict(),
        }
