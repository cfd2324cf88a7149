"""
Audit trail for every comparison attempt. Writes to <log_dir>/YYYYMMDD.jsonl
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


def log_run(
    log_dir: Path,
    kind: str,
    name1: str,
    name2: str,
    provider: str,
    prompt_used: str,
    raw_output: str,
    parsed_output: dict[str, Any] | None,
    valid: bool,
    error_kind: str | None = None,
    error_message: str | None = None,
    model_name: str | None = None,
    temperature: float | None = None,
    **extra: Any,
) -> Path:
    log_dir.mkdir(parents=True, exist_ok=True)
    now = datetime.now(timezone.utc)
    # One file per UTC day
    log_file = log_dir / f"{now.strftime('%Y%m%d')}.jsonl"
    record = {
        "kind": kind,
        "name1": name1,
        "name2": name2,
        "provider": provider,
        "prompt_used": prompt_used[:500] if prompt_used else "",
        "raw_output": raw_output[:2000] if raw_output else "",
        "parsed_output": parsed_output,
        "valid": valid,
        "error_kind": error_kind,
        "error_message": error_message[:500] if error_message else None,
        "timestamp": now.isoformat().replace("+00:00", "Z"),
        "model_name": model_name,
        "temperature": temperature,
        **extra,
    }
    with open(log_file, "a") as f:
        f.write(json.dumps(record, default=str) + "\n")
    return log_file
