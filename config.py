"""
Providers, model defaults and input bounds for hardware comparisons.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_ROOT = Path(__file__).resolve().parent
# Audit log directory; unset means the web app does not write audit records
_log_dir = os.environ.get("HWCOMPARE_LOG_DIR", "").strip()
LOG_DIR = Path(_log_dir) if _log_dir else None
DEFAULT_CLI_LOG_DIR = _ROOT / "logs"


@dataclass
class HardwareKind:
    id: str
    noun: str
    label: str
    slot_label: str


KINDS = {
    "cpu": HardwareKind("cpu", noun="processor", label="CPU Compare", slot_label="Processor"),
    "gpu": HardwareKind("gpu", noun="graphics card", label="GPU Compare", slot_label="Graphics Card"),
}

# Providers (for UI: OpenAI vs Claude, plus an offline mock)
PROVIDERS = ("openai", "claude", "mock")
PROVIDER_LABELS = {
    "openai": "OpenAI (GPT)",
    "claude": "Claude (Anthropic)",
    "mock": "Mock (offline)",
}
PROVIDER_API_KEYS = {
    "openai": "OPENAI_API_KEY",
    "claude": "ANTHROPIC_API_KEY",
}
DEFAULT_PROVIDER = os.environ.get("HWCOMPARE_PROVIDER", "openai").strip().lower() or "openai"

DEFAULT_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o-mini")
DEFAULT_CLAUDE_MODEL = os.environ.get("ANTHROPIC_MODEL", "claude-3-5-haiku-20241022")
DEFAULT_TEMPERATURE = 0.2
MAX_OUTPUT_TOKENS = 2048
REQUEST_TIMEOUT_SECONDS = 90.0

# Model name input bounds (trimmed length)
MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 50

MAX_SUGGESTIONS = 8


def api_key_for(provider: str) -> str:
    """Return the configured API key for provider, or '' (mock needs none)."""
    env_name = PROVIDER_API_KEYS.get(provider)
    if not env_name:
        return ""
    return os.environ.get(env_name, "").strip()


def missing_key_message(provider: str) -> str | None:
    """User-facing message when provider has no credential; None if usable."""
    env_name = PROVIDER_API_KEYS.get(provider)
    if env_name is None or api_key_for(provider):
        return None
    return f"{env_name} is required for {PROVIDER_LABELS[provider]}. Set it in your environment."
