"""
ComparisonAgent: asks the collaborator for a structured two-model comparison.
Supports: OpenAI (schema-constrained structured output), Claude (JSON-only
instruction, free text back) and a deterministic offline mock.
The collaborator is called exactly once per request; there is no retry.
"""

from __future__ import annotations

import json
import re
from typing import Any

from anthropic import Anthropic
from openai import OpenAI

from config import (
    DEFAULT_CLAUDE_MODEL,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    KINDS,
    MAX_OUTPUT_TOKENS,
    PROVIDER_LABELS,
    PROVIDERS,
    REQUEST_TIMEOUT_SECONDS,
    api_key_for,
    missing_key_message,
)
from errors import RequestError
from schemas import (
    FIELD_EXAMPLES,
    NUMERIC_FIELDS,
    SPEC_FIELDS,
    SUMMARY_FIELDS,
    ComparisonResult,
    comparison_schema,
    slot_keys,
)

from .response_parser import ResponseParser

SYSTEM_PROMPT = """You are a PC hardware comparison system. You must respond with valid JSON only.
Use the most recent specifications and benchmark results you know of.
If a value cannot be found, use "N/A". Do not include any other text, explanations, or markdown formatting."""

# Per-kind details for the user prompt
_BENCHMARKS = {
    "cpu": (
        "- Cinebench R23 Multi-Core score\n"
        "- Cinebench R23 Single-Core score\n"
        "- Idle Power Consumption (in Watts)\n"
        "- Peak Power Draw under load (in Watts)"
    ),
    "gpu": (
        "- 3DMark Time Spy Graphics score\n"
        "- 3DMark Port Royal Ray Tracing score\n"
        "- Idle Power Consumption (in Watts)\n"
        "- Peak Power Draw during gaming (in Watts)"
    ),
}
_RECOMMENDATION_HINT = {
    "cpu": "along with an overall recommendation",
    "gpu": "along with an overall recommendation for different resolutions",
}

USER_PROMPT_TEMPLATE = """You are a {kind_upper} comparison expert.
Compare the following two {noun}s: "{name1}" and "{name2}".

Find their technical specifications, power consumption, and the following benchmark scores:
{benchmarks}

Provide a summary of which is better for performance, value, and gaming, {recommendation_hint}.

Respond ONLY with a single, valid JSON object that conforms to the structure below.
If a value cannot be found, use "N/A".

JSON structure:
{structure}"""


def _field_hint(kind: str, name: str) -> str:
    if name in NUMERIC_FIELDS:
        return "number"
    example = FIELD_EXAMPLES[kind].get(name)
    return f"string (e.g., '{example}')" if example else "string"


def describe_structure(kind: str) -> str:
    """Human-readable rendering of the reply schema for the prompt."""
    s1, s2 = slot_keys(kind)
    winners = f"string ('{s1}', '{s2}', or 'tie')"
    spec = {name: _field_hint(kind, name) for name in SPEC_FIELDS[kind]}
    summary = {name: winners for name in SUMMARY_FIELDS}
    summary["overallRecommendation"] = "string (detailed paragraph)"
    structure = {s1: spec, s2: f"... same structure as {s1} ...", "summary": summary}
    return json.dumps(structure, indent=2)


class ComparisonAgent:
    """Builds the prompt and makes the single collaborator call. provider in PROVIDERS."""

    def __init__(
        self,
        provider: str = "openai",
        model_name: str | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
        client: Any = None,
    ) -> None:
        self.provider = (provider or "openai").lower()
        if self.provider not in PROVIDERS:
            raise ValueError(f"unknown provider: {provider}")
        if model_name is None:
            model_name = DEFAULT_CLAUDE_MODEL if self.provider == "claude" else DEFAULT_MODEL
        self.model_name = model_name if self.provider != "mock" else "mock"
        self.temperature = temperature
        self._client = client

    def build_prompt(self, kind: str, name1: str, name2: str) -> str:
        info = KINDS[kind]
        return USER_PROMPT_TEMPLATE.format(
            kind_upper=kind.upper(),
            noun=info.noun,
            name1=name1,
            name2=name2,
            benchmarks=_BENCHMARKS[kind],
            recommendation_hint=_RECOMMENDATION_HINT[kind],
            structure=describe_structure(kind),
        )

    def compare(self, kind: str, name1: str, name2: str) -> ComparisonResult:
        """Prompt, call once, parse. Raises RequestError or ParseError."""
        raw = self.generate(kind, self.build_prompt(kind, name1, name2), names=(name1, name2))
        return ResponseParser(kind).run(raw, fallback_names=(name1, name2))

    def generate(self, kind: str, prompt: str, names: tuple[str, str] | None = None) -> str:
        """One collaborator call; returns the raw reply text. names feed the mock provider."""
        if self.provider == "mock":
            return self._mock_generate(kind, prompt, names)
        try:
            if self.provider == "claude":
                text = self._claude_generate(prompt)
            else:
                text = self._openai_generate(kind, prompt)
        except RequestError:
            raise
        except Exception as e:
            raise RequestError(
                f"Failed to get data from {PROVIDER_LABELS[self.provider]}: {str(e)[:300]}",
                provider=self.provider,
            ) from e
        if not text:
            raise RequestError(f"{PROVIDER_LABELS[self.provider]} returned an empty response", provider=self.provider)
        return text

    def _client_for_provider(self) -> Any:
        if self._client is not None:
            return self._client
        api_key = api_key_for(self.provider)
        if not api_key:
            raise RequestError(missing_key_message(self.provider) or "No API key configured", provider=self.provider)
        if self.provider == "claude":
            self._client = Anthropic(api_key=api_key, timeout=REQUEST_TIMEOUT_SECONDS)
        else:
            self._client = OpenAI(api_key=api_key, timeout=REQUEST_TIMEOUT_SECONDS)
        return self._client

    def _openai_generate(self, kind: str, prompt: str) -> str:
        """Schema-constrained structured output."""
        client = self._client_for_provider()
        resp = client.chat.completions.create(
            model=self.model_name,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=self.temperature,
            max_tokens=MAX_OUTPUT_TOKENS,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": f"{kind}_comparison",
                    "schema": comparison_schema(kind),
                    "strict": True,
                },
            },
        )
        return (resp.choices[0].message.content or "").strip()

    def _claude_generate(self, prompt: str) -> str:
        """Free-text reply; the prompt asks for JSON only."""
        client = self._client_for_provider()
        resp = client.messages.create(
            model=self.model_name,
            max_tokens=MAX_OUTPUT_TOKENS,
            system=SYSTEM_PROMPT,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
        )
        text = ""
        for block in (resp.content or []):
            if getattr(block, "type", None) == "text" and hasattr(block, "text"):
                text += block.text
        return text.strip()

    def _mock_generate(self, kind: str, prompt: str, names: tuple[str, str] | None = None) -> str:
        """Deterministic mock: figures derived from the digits in each name."""
        if names is None:
            # no names passed: take the two quoted names of the prompt
            names = re.findall(r'"([^"]+)" and "([^"]+)"', prompt)[:1]
            names = list(names[0]) if names else []
        if len(names) < 2:
            names = [f"{kind.upper()} A", f"{kind.upper()} B"]
        payload = mock_payload(kind, names[0], names[1])
        return "```json\n" + json.dumps(payload, indent=2) + "\n```"


def _tier(name: str) -> int:
    digits = re.findall(r"\d+", name)
    return int(digits[0]) % 100 if digits else len(name)


def mock_payload(kind: str, name1: str, name2: str) -> dict[str, Any]:
    s1, s2 = slot_keys(kind)
    specs = []
    for name in (name1, name2):
        t = _tier(name)
        if kind == "cpu":
            cores = 6 + (t % 5) * 4
            specs.append({
                "model": name,
                "cores": cores,
                "threads": cores * 2,
                "baseClock": f"{3.0 + (t % 6) / 10:.1f} GHz",
                "boostClock": f"{4.6 + (t % 12) / 10:.1f} GHz",
                "tdp": f"{65 + (t % 4) * 30}W",
                "idlePower": f"{6 + t % 10}W",
                "peakPower": f"{120 + (t % 5) * 35}W",
                "l3Cache": f"{16 + (t % 4) * 16}MB",
                "socket": "N/A",
                "integratedGraphics": "N/A",
                "releaseDate": "N/A",
                "cinebenchR23MultiCore": f"{12000 + cores * 1200:,}",
                "cinebenchR23SingleCore": f"{1700 + (t % 10) * 40:,}",
            })
        else:
            specs.append({
                "model": name,
                "vram": f"{8 + (t % 4) * 4} GB",
                "memoryType": "N/A",
                "boostClock": f"{2200 + (t % 10) * 50} MHz",
                "tdp": f"{160 + (t % 6) * 30}W",
                "idlePower": f"{8 + t % 12}W",
                "peakPower": f"{150 + (t % 6) * 30}W",
                "architecture": "N/A",
                "releaseDate": "N/A",
                "timeSpyGraphicsScore": f"{10000 + t * 250:,}",
                "portRoyalRayTracingScore": f"{5000 + t * 150:,}",
            })
    t1, t2 = _tier(name1), _tier(name2)
    winner = s1 if t1 > t2 else s2 if t2 > t1 else "tie"
    value = s2 if winner == s1 else s1 if winner == s2 else "tie"
    return {
        s1: specs[0],
        s2: specs[1],
        "summary": {
            "performanceWinner": winner,
            "valueWinner": value,
            "gamingWinner": winner,
            "overallRecommendation": f"Mock comparison of {name1} and {name2}; figures are synthetic.",
        },
    }
