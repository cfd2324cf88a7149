"""
Flask web app for side-by-side CPU / GPU comparisons.
Pick two models, ask the collaborator for a structured comparison, show the spec
table with per-row winners and the summary.
"""

from __future__ import annotations

import os

from flask import Flask, jsonify, render_template_string, request

from catalog import DEFAULT_NAMES, MODEL_NAMES, presets_for, suggest
from config import DEFAULT_PROVIDER, KINDS, LOG_DIR, PROVIDER_LABELS, PROVIDERS
from errors import ComparisonError, ParseError, RequestError, ValidationError, user_message
from pipeline import make_requester, run_pipeline
from renderer import render_comparison
from view_state import (
    RequestStatus,
    ViewState,
    can_compare,
    select_mode,
    select_preset,
    submit_compare,
)

app = Flask(__name__)


HTML_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <title>Hardware Compare</title>
    <style>
        :root { --step-bg: #f8f9fa; --step-border: #dee2e6; --accent: #0d6efd; --valid: #198754; --invalid: #dc3545; --tie: #b58105; }
        body { font-family: system-ui, -apple-system, sans-serif; max-width: 960px; margin: 0 auto; padding: 24px; line-height: 1.5; color: #212529; }
        h1 { font-size: 1.5rem; margin-bottom: 0.5rem; }
        .subtitle { color: #6c757d; margin-bottom: 1.5rem; }
        .tabs { display: flex; gap: 4px; border-bottom: 1px solid var(--step-border); margin-bottom: 1rem; }
        .tab { background: none; border: none; padding: 8px 16px; cursor: pointer; color: #6c757d; font-size: 0.95rem; }
        .tab.active { color: var(--accent); border-bottom: 2px solid var(--accent); font-weight: 600; }
        .step { background: var(--step-bg); border: 1px solid var(--step-border); border-radius: 8px; padding: 1rem 1.25rem; margin: 0.75rem 0; }
        .presets button { font-size: 0.8rem; margin: 2px; }
        .inputs { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; margin: 12px 0; }
        .inputs input[type=text] { width: 100%; padding: 6px 8px; box-sizing: border-box; }
        .field-error { color: var(--invalid); font-size: 0.85rem; }
        .btn { background: var(--accent); color: #fff; padding: 8px 16px; border: none; border-radius: 6px; cursor: pointer; font-size: 0.95rem; }
        .btn:disabled { opacity: 0.5; cursor: not-allowed; }
        .btn-secondary { background: #6c757d; }
        table { width: 100%; border-collapse: collapse; margin: 12px 0; font-size: 0.9rem; }
        th, td { border: 1px solid var(--step-border); padding: 6px 10px; }
        th { background: #e9ecef; font-weight: 600; }
        td.value { text-align: center; }
        .winner { color: var(--valid); font-weight: 700; }
        .loser { color: var(--invalid); }
        .neutral { color: #212529; }
        .help { cursor: help; color: #6c757d; }
        .error { color: var(--invalid); padding: 10px; background: #f8d7da; border-radius: 6px; margin: 10px 0; }
        .cards { display: grid; grid-template-columns: repeat(3, 1fr); gap: 10px; margin: 10px 0; }
        .card { background: #fff; border: 1px solid var(--step-border); border-radius: 6px; padding: 10px; }
        .card .title { font-size: 0.8rem; color: #6c757d; }
        .card .label { font-weight: 700; font-size: 1.1rem; color: var(--valid); }
        .card .label.tie { color: var(--tie); }
    </style>
</head>
<body>
    <h1>Hardware Compare</h1>
    <p class="subtitle">Side-by-side specifications, benchmarks and a recommendation for two CPUs or two GPUs.</p>

    <form method="post" id="compare-form">
        <input type="hidden" name="mode" value="{{ state.mode }}">
        <div class="tabs">
            {% for k in kinds.values() %}
            <button type="submit" name="action" value="mode:{{ k.id }}" class="tab {{ 'active' if state.mode == k.id else '' }}">{{ k.label }}</button>
            {% endfor %}
        </div>

        <div class="step">
            <div class="presets">
                <label>Load an example comparison:</label>
                {% for p in presets %}
                <button type="submit" name="action" value="preset:{{ p.id }}" class="btn btn-secondary">{{ p.label }}</button>
                {% endfor %}
            </div>
            <div class="inputs">
                {% for slot in (1, 2) %}
                <div>
                    <label for="{{ state.mode }}{{ slot }}">{{ kinds[state.mode].slot_label }} {{ slot }}</label>
                    <input type="text" id="{{ state.mode }}{{ slot }}" name="{{ state.mode }}{{ slot }}"
                           value="{{ state.names[slot - 1] }}" list="suggestions-{{ slot }}" autocomplete="off"
                           data-kind="{{ state.mode }}" class="model-input">
                    <datalist id="suggestions-{{ slot }}"></datalist>
                    {% if state.field_errors[slot - 1] %}
                    <div class="field-error">{{ state.field_errors[slot - 1] }}</div>
                    {% endif %}
                </div>
                {% endfor %}
            </div>
            {# the inactive pair rides along so switching tabs keeps both #}
            {% for other in kinds if other != state.mode %}
            {% set other_names = state.cpu_names if other == 'cpu' else state.gpu_names %}
            <input type="hidden" name="{{ other }}1" value="{{ other_names[0] }}">
            <input type="hidden" name="{{ other }}2" value="{{ other_names[1] }}">
            {% endfor %}
            <label>Provider:
                <select name="provider">
                    {% for p in providers %}
                    <option value="{{ p }}" {{ 'selected' if provider == p else '' }}>{{ provider_labels[p] }}</option>
                    {% endfor %}
                </select>
            </label>
            <button type="submit" name="action" value="compare" class="btn" id="compare-btn" {{ '' if compare_enabled else 'disabled' }}>Compare</button>
        </div>
    </form>

    {% if state.error %}
    <div class="error">{{ state.error }}</div>
    {% endif %}

    {% if rendered %}
    <div class="step">
        <table>
            <thead>
                <tr><th>Specification</th><th>{{ rendered.name1 }}</th><th>{{ rendered.name2 }}</th></tr>
            </thead>
            <tbody>
                {% for row in rendered.rows %}
                <tr>
                    <td>{{ row.label }}{% if row.tooltip %} <span class="help" title="{{ row.tooltip }}">&#9432;</span>{% endif %}</td>
                    <td class="value {{ row.style1 }}">{{ row.value1 }}{% if row.style1 == 'winner' %} &#10003;{% endif %}</td>
                    <td class="value {{ row.style2 }}">{{ row.value2 }}{% if row.style2 == 'winner' %} &#10003;{% endif %}</td>
                </tr>
                {% endfor %}
            </tbody>
        </table>
    </div>
    <div class="step">
        <h2>Summary</h2>
        <div class="cards">
            {% for card in rendered.cards %}
            <div class="card"><div class="title">{{ card.title }}</div><div class="label {{ 'tie' if card.is_tie else '' }}">{{ card.label }}</div></div>
            {% endfor %}
        </div>
        <h3>Overall Recommendation</h3>
        <p>{{ rendered.recommendation }}</p>
    </div>
    {% endif %}

    <script>
    document.querySelectorAll('.model-input').forEach(function (input) {
        input.addEventListener('input', function () {
            var list = document.getElementById(input.getAttribute('list'));
            if (!input.value) { list.innerHTML = ''; return; }
            fetch('/api/suggest?kind=' + input.dataset.kind + '&q=' + encodeURIComponent(input.value))
                .then(function (r) { return r.json(); })
                .then(function (data) {
                    list.innerHTML = '';
                    data.suggestions.forEach(function (s) {
                        var opt = document.createElement('option');
                        opt.value = s;
                        list.appendChild(opt);
                    });
                });
        });
    });
    document.getElementById('compare-form').addEventListener('submit', function (e) {
        if (e.submitter && e.submitter.value === 'compare') {
            var btn = document.getElementById('compare-btn');
            setTimeout(function () { btn.disabled = true; btn.textContent = 'Comparing...'; }, 0);
        }
    });
    </script>
</body>
</html>
"""


def _provider_from(value: str | None) -> str:
    provider = (value or DEFAULT_PROVIDER).lower()
    return provider if provider in PROVIDERS else "openai"


def _logged_requester(provider: str):
    requester = make_requester(provider, LOG_DIR)

    def _run(kind: str, name1: str, name2: str):
        try:
            return requester(kind, name1, name2)
        except (RequestError, ParseError) as e:
            app.logger.warning("%s comparison failed (%s): %s", kind, type(e).__name__, e)
            raise

    return _run


def state_from_form(form) -> ViewState:
    mode = form.get("mode", "cpu")
    if mode not in KINDS:
        mode = "cpu"
    return ViewState(
        mode=mode,
        cpu_names=(form.get("cpu1", DEFAULT_NAMES["cpu"][0]), form.get("cpu2", DEFAULT_NAMES["cpu"][1])),
        gpu_names=(form.get("gpu1", DEFAULT_NAMES["gpu"][0]), form.get("gpu2", DEFAULT_NAMES["gpu"][1])),
    )


def apply_action(state: ViewState, action: str, provider: str) -> ViewState:
    if action.startswith("mode:"):
        return select_mode(state, action.split(":", 1)[1])
    if action.startswith("preset:"):
        return select_preset(state, action.split(":", 1)[1])
    if action == "compare":
        try:
            return submit_compare(state, _logged_requester(provider))
        except Exception:
            app.logger.exception("unexpected error during %s comparison", state.mode)
            return ViewState(
                mode=state.mode,
                cpu_names=state.cpu_names,
                gpu_names=state.gpu_names,
                status=RequestStatus.FAILED,
                error="An unexpected error occurred.",
                last_token=state.last_token,
            )
    return state


def _render(state: ViewState, provider: str):
    rendered = render_comparison(state.result) if state.result is not None else None
    return render_template_string(
        HTML_TEMPLATE,
        state=state,
        kinds=KINDS,
        presets=presets_for(state.mode),
        providers=PROVIDERS,
        provider_labels=PROVIDER_LABELS,
        provider=provider,
        compare_enabled=can_compare(state),
        rendered=rendered,
    )


@app.route("/", methods=["GET", "POST"])
def index():
    if request.method == "GET":
        mode = request.args.get("mode", "cpu")
        state = ViewState(mode=mode if mode in KINDS else "cpu")
        return _render(state, _provider_from(None))
    provider = _provider_from(request.form.get("provider"))
    state = state_from_form(request.form)
    state = apply_action(state, request.form.get("action", ""), provider)
    return _render(state, provider)


@app.route("/api/suggest", methods=["GET"])
def suggest_api():
    kind = request.args.get("kind", "cpu")
    if kind not in MODEL_NAMES:
        return jsonify({"suggestions": []})
    return jsonify({"suggestions": suggest(kind, request.args.get("q", ""))})


@app.route("/api/compare", methods=["POST"])
def compare_api():
    """Run one comparison and return JSON (for async fetch)."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"success": False, "error": "Request body must be a JSON object"})
    kind = data.get("kind") or "cpu"
    if not isinstance(kind, str) or kind.lower() not in KINDS:
        return jsonify({"success": False, "error": f"kind must be one of {list(KINDS)}"})
    kind = kind.lower()
    provider = data.get("provider")
    provider = _provider_from(provider if isinstance(provider, str) else None)
    name1, name2 = data.get("name1"), data.get("name2")
    try:
        result = run_pipeline(
            kind,
            "" if name1 is None else str(name1),
            "" if name2 is None else str(name2),
            provider_id=provider,
            log_dir=LOG_DIR,
        )
    except ValidationError as e:
        return jsonify({
            "success": False,
            "error": "Invalid input",
            "field_errors": {str(k): v for k, v in e.field_errors.items()},
        })
    except ComparisonError as e:
        app.logger.warning("%s comparison failed (%s): %s", kind, type(e).__name__, e)
        return jsonify({"success": False, "error": user_message(e)})
    except Exception:
        app.logger.exception("unexpected error during %s comparison", kind)
        return jsonify({"success": False, "error": "An unexpected error occurred."})
    rendered = render_comparison(result)
    return jsonify({
        "success": True,
        "kind": result.kind,
        "result": result.to_payload(),
        "rows": [r.to_dict() for r in rendered.rows],
        "summary": {
            "cards": [c.to_dict() for c in rendered.cards],
            "recommendation": rendered.recommendation,
        },
    })


@app.route("/healthz", methods=["GET"])
def healthz():
    return jsonify({"status": "ok"})


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=False)
