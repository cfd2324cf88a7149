"""
Comparison pipeline: strict flow with typed data between steps.
Start -> InputGuard -> ComparisonAgent (prompt + one collaborator call)
-> ResponseParser -> audit log (optional) -> ComparisonResult
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any

from audit_logger import log_run
from comparator import ComparisonAgent, InputGuard, ResponseParser
from config import DEFAULT_PROVIDER, DEFAULT_TEMPERATURE, KINDS, PROVIDERS
from errors import ComparisonError, ParseError, RequestError
from schemas import ComparisonResult


def run_pipeline(
    kind: str,
    name1: str,
    name2: str,
    provider_id: str | None = None,
    agent: ComparisonAgent | None = None,
    log_dir: Path | None = None,
    temperature: float = DEFAULT_TEMPERATURE,
) -> ComparisonResult:
    """
    Single comparison. Raises ValidationError before any collaborator call,
    RequestError when the call fails, ParseError when the reply is unusable.
    """
    if kind not in KINDS:
        raise ValueError(f"unknown hardware kind: {kind}")
    name1, name2 = InputGuard().check(name1, name2)

    if agent is None:
        provider = (provider_id or DEFAULT_PROVIDER).lower()
        if provider not in PROVIDERS:
            provider = "openai"
        agent = ComparisonAgent(provider=provider, temperature=temperature)

    prompt = agent.build_prompt(kind, name1, name2)
    raw = ""
    start = time.time()
    try:
        raw = agent.generate(kind, prompt, names=(name1, name2))
        result = ResponseParser(kind).run(raw, fallback_names=(name1, name2))
    except (RequestError, ParseError) as e:
        if log_dir is not None:
            _log(log_dir, agent, kind, name1, name2, prompt, raw, None, e, time.time() - start)
        raise
    if log_dir is not None:
        _log(log_dir, agent, kind, name1, name2, prompt, raw, result.to_payload(), None, time.time() - start)
    return result


def _log(
    log_dir: Path,
    agent: ComparisonAgent,
    kind: str,
    name1: str,
    name2: str,
    prompt: str,
    raw: str,
    parsed: dict[str, Any] | None,
    err: ComparisonError | None,
    elapsed: float,
) -> None:
    log_run(
        log_dir,
        kind=kind,
        name1=name1,
        name2=name2,
        provider=agent.provider,
        prompt_used=prompt,
        raw_output=raw,
        parsed_output=parsed,
        valid=err is None,
        error_kind=type(err).__name__ if err is not None else None,
        error_message=str(err) if err is not None else None,
        model_name=agent.model_name,
        temperature=agent.temperature,
        elapsed_seconds=round(elapsed, 2),
    )


def make_requester(provider_id: str | None = None, log_dir: Path | None = None):
    """Requester callable for view_state.submit_compare."""

    def _requester(kind: str, name1: str, name2: str) -> ComparisonResult:
        return run_pipeline(kind, name1, name2, provider_id=provider_id, log_dir=log_dir)

    return _requester
