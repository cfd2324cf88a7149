"""
ResponseParser: turns the collaborator's raw reply into a ComparisonResult.
Tolerates prose and ```json fences around the object; rejects anything whose
slots, summary or winner values do not match the contract.
"""

from __future__ import annotations

import json
import re
from typing import Any

from errors import ParseError
from schemas import (
    NOT_AVAILABLE,
    SPEC_FIELDS,
    ComparisonResult,
    HardwareSpec,
    Summary,
    slot_keys,
    validate_comparison_output,
)

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]+?)\s*```", re.IGNORECASE)


def extract_json(text: str) -> Any | None:
    """Decode the first JSON object in text (whole text, fenced block, or bare object)."""
    stripped = (text or "").strip()
    if not stripped:
        return None
    try:
        return json.loads(stripped)
    except json.JSONDecodeError:
        pass
    match = _FENCE_RE.search(stripped)
    if match:
        try:
            return json.loads(match.group(1))
        except json.JSONDecodeError:
            pass
    decoder = json.JSONDecoder()
    start = stripped.find("{")
    while start != -1:
        try:
            obj, _ = decoder.raw_decode(stripped, start)
            return obj
        except json.JSONDecodeError:
            start = stripped.find("{", start + 1)
    return None


def _leaf(value: Any) -> Any:
    if value is None or value == "":
        return NOT_AVAILABLE
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float, str)):
        return value
    return json.dumps(value)


class ResponseParser:
    """Outputs a typed ComparisonResult or raises ParseError; never a partial result."""

    def __init__(self, kind: str) -> None:
        if kind not in SPEC_FIELDS:
            raise ValueError(f"unknown hardware kind: {kind}")
        self.kind = kind

    def run(self, raw: str, fallback_names: tuple[str, str] | None = None) -> ComparisonResult:
        data = extract_json(raw)
        if data is None:
            raise ParseError(f"Invalid JSON: {(raw or '')[:180]}", raw=raw or "")
        valid, msg = validate_comparison_output(data, self.kind)
        if not valid:
            raise ParseError(msg, raw=raw)
        s1, s2 = slot_keys(self.kind)
        fallback = fallback_names or (NOT_AVAILABLE, NOT_AVAILABLE)
        return ComparisonResult(
            kind=self.kind,
            slot1=self._spec(data[s1], fallback[0]),
            slot2=self._spec(data[s2], fallback[1]),
            summary=Summary.from_dict(data["summary"]),
        )

    def _spec(self, raw_spec: dict[str, Any], fallback_model: str) -> HardwareSpec:
        values: dict[str, Any] = {}
        for name in SPEC_FIELDS[self.kind]:
            values[name] = _leaf(raw_spec.get(name))
        # model must stay a non-empty display string
        model = values["model"]
        if model == NOT_AVAILABLE or not str(model).strip():
            values["model"] = fallback_model or NOT_AVAILABLE
        else:
            values["model"] = str(model)
        return HardwareSpec(kind=self.kind, values=values)


def parse(raw: str, kind: str, fallback_names: tuple[str, str] | None = None) -> ComparisonResult:
    return ResponseParser(kind).run(raw, fallback_names=fallback_names)
