"""
View state machine for the comparison page.
One immutable ViewState, replaced wholesale by each transition:
Idle -> Loading -> Succeeded | Failed -> Idle (on mode change or edit).
Each request carries a token; outcomes for a token that is no longer pending are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from catalog import DEFAULT_NAMES, find_preset
from comparator import InputGuard
from errors import ComparisonError, user_message
from schemas import ComparisonResult

RequestStatus = Enum("RequestStatus", "IDLE LOADING SUCCEEDED FAILED")

Requester = Callable[[str, str, str], ComparisonResult]


@dataclass(frozen=True)
class ViewState:
    mode: str = "cpu"
    cpu_names: tuple[str, str] = DEFAULT_NAMES["cpu"]
    gpu_names: tuple[str, str] = DEFAULT_NAMES["gpu"]
    field_errors: tuple[str | None, str | None] = (None, None)
    status: RequestStatus = RequestStatus.IDLE
    result: ComparisonResult | None = None
    error: str | None = None
    last_token: int = 0
    pending_token: int | None = None

    @property
    def names(self) -> tuple[str, str]:
        """Input pair of the active mode."""
        return self.cpu_names if self.mode == "cpu" else self.gpu_names

    @property
    def is_loading(self) -> bool:
        return self.status == RequestStatus.LOADING


def initial_state(mode: str = "cpu") -> ViewState:
    return ViewState(mode=mode)


def _with_names(state: ViewState, names: tuple[str, str]) -> ViewState:
    if state.mode == "cpu":
        return replace(state, cpu_names=names)
    return replace(state, gpu_names=names)


def _cleared(state: ViewState) -> ViewState:
    """Back to Idle with no result or error; any in-flight request becomes stale."""
    return replace(
        state,
        status=RequestStatus.IDLE,
        result=None,
        error=None,
        pending_token=None,
    )


def select_mode(state: ViewState, kind: str) -> ViewState:
    if kind == state.mode:
        return state
    if kind not in ("cpu", "gpu"):
        raise ValueError(f"unknown mode: {kind}")
    return replace(_cleared(state), mode=kind, field_errors=(None, None))


def edit_field(state: ViewState, slot: int, text: str) -> ViewState:
    if slot not in (1, 2):
        raise ValueError(f"slot must be 1 or 2, got {slot}")
    names = list(state.names)
    names[slot - 1] = text
    errors = list(state.field_errors)
    errors[slot - 1] = None
    new = _with_names(_cleared(state), (names[0], names[1]))
    return replace(new, field_errors=(errors[0], errors[1]))


def select_suggestion(state: ViewState, slot: int, text: str) -> ViewState:
    return edit_field(state, slot, text)


def select_preset(state: ViewState, preset_id: str) -> ViewState:
    """Fill both active fields from a preset of the active mode; unknown ids are ignored."""
    preset = find_preset(preset_id)
    if preset is None or preset.kind != state.mode:
        return state
    new = _with_names(_cleared(state), (preset.name1, preset.name2))
    return replace(new, field_errors=(None, None))


def can_compare(state: ViewState) -> bool:
    n1, n2 = state.names
    return not state.is_loading and bool(n1.strip()) and bool(n2.strip())


def begin_compare(state: ViewState) -> ViewState:
    """Validate the active pair; Idle with per-field errors, or Loading with a fresh token."""
    if state.is_loading:
        return state
    errors = InputGuard().run(*state.names)
    base = replace(state, result=None, error=None)
    if errors:
        return replace(
            base,
            status=RequestStatus.IDLE,
            pending_token=None,
            field_errors=(errors.get(1), errors.get(2)),
        )
    token = state.last_token + 1
    return replace(
        base,
        status=RequestStatus.LOADING,
        field_errors=(None, None),
        last_token=token,
        pending_token=token,
    )


def finish_compare(
    state: ViewState,
    token: int,
    result: ComparisonResult | None = None,
    error: str | None = None,
) -> ViewState:
    """Apply a request outcome, unless the request it belongs to is no longer pending."""
    if not state.is_loading or token != state.pending_token:
        return state
    if result is not None and result.kind == state.mode and error is None:
        return replace(state, status=RequestStatus.SUCCEEDED, result=result, error=None, pending_token=None)
    return replace(
        state,
        status=RequestStatus.FAILED,
        result=None,
        error=error or "An unexpected error occurred.",
        pending_token=None,
    )


def submit_compare(state: ViewState, requester: Requester) -> ViewState:
    """Validate, call requester(kind, name1, name2) once, and settle; never left Loading."""
    loading = begin_compare(state)
    if not loading.is_loading or loading.pending_token == state.pending_token:
        return loading
    token = loading.pending_token
    n1, n2 = loading.names
    try:
        result = requester(loading.mode, n1.strip(), n2.strip())
    except ComparisonError as e:
        return finish_compare(loading, token, error=user_message(e))
    return finish_compare(loading, token, result=result)
