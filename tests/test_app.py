"""
Flask route tests. Comparisons run against the offline mock provider.
"""

import pytest

from app import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def _form(**overrides):
    form = {
        "mode": "cpu",
        "provider": "mock",
        "cpu1": "Intel Core i9-14900K",
        "cpu2": "AMD Ryzen 9 7950X",
        "gpu1": "NVIDIA GeForce RTX 4090",
        "gpu2": "AMD Radeon RX 7900 XTX",
        "action": "compare",
    }
    form.update(overrides)
    return form


class TestIndex:

    def test_get(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        body = resp.get_data(as_text=True)
        assert "Hardware Compare" in body
        assert 'name="cpu1"' in body
        assert "Intel Core i9-14900K" in body

    def test_get_gpu_tab(self, client):
        body = client.get("/?mode=gpu").get_data(as_text=True)
        assert 'name="gpu1"' in body
        assert "RTX 4090 vs 7900 XTX" in body

    def test_compare_renders_table(self, client):
        body = client.post("/", data=_form(cpu1="Intel Core i5-14600K", cpu2="AMD Ryzen 7 7800X3D")).get_data(as_text=True)
        assert "Specification" in body
        assert "Performance Winner" in body
        assert "Overall Recommendation" in body
        assert 'class="value winner"' in body

    def test_mode_switch(self, client):
        body = client.post("/", data=_form(action="mode:gpu")).get_data(as_text=True)
        assert 'id="gpu1"' in body
        assert "Specification" not in body
        # cpu pair kept in hidden fields
        assert 'name="cpu1" value="Intel Core i9-14900K"' in body

    def test_preset(self, client):
        body = client.post("/", data=_form(action="preset:cpu-mid")).get_data(as_text=True)
        assert 'value="Intel Core i5-14600K"' in body
        assert 'value="AMD Ryzen 7 7800X3D"' in body

    def test_short_name_error(self, client):
        body = client.post("/", data=_form(cpu2="ab")).get_data(as_text=True)
        assert "Model name seems too short" in body
        assert "Specification" not in body

    def test_blank_name_disables_compare(self, client):
        body = client.post("/", data=_form(cpu1="", action="")).get_data(as_text=True)
        assert 'id="compare-btn" disabled' in body

    def test_missing_key_shows_error(self, client, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        body = client.post("/", data=_form(provider="openai")).get_data(as_text=True)
        assert "OPENAI_API_KEY is required" in body
        assert "Specification" not in body


class TestApi:

    def test_suggest(self, client):
        data = client.get("/api/suggest?kind=gpu&q=7900").get_json()
        assert data["suggestions"] == ["AMD Radeon RX 7900 XTX", "AMD Radeon RX 7900 XT"]

    def test_suggest_unknown_kind(self, client):
        assert client.get("/api/suggest?kind=ram&q=ddr").get_json() == {"suggestions": []}

    def test_compare(self, client):
        resp = client.post("/api/compare", json={
            "kind": "gpu",
            "name1": "NVIDIA GeForce RTX 4070",
            "name2": "AMD Radeon RX 7800 XT",
            "provider": "mock",
        })
        data = resp.get_json()
        assert data["success"] is True
        assert data["kind"] == "gpu"
        assert data["result"]["gpu1"]["model"] == "NVIDIA GeForce RTX 4070"
        assert {r["key"] for r in data["rows"]} >= {"vram", "tdp"}
        assert len(data["summary"]["cards"]) == 3

    def test_compare_field_errors(self, client):
        data = client.post("/api/compare", json={
            "kind": "cpu", "name1": "", "name2": "x" * 51, "provider": "mock",
        }).get_json()
        assert data["success"] is False
        assert set(data["field_errors"]) == {"1", "2"}

    def test_compare_bad_kind(self, client):
        data = client.post("/api/compare", json={"kind": "ram"}).get_json()
        assert data["success"] is False

    def test_compare_body_not_object(self, client):
        resp = client.post("/api/compare", json=["cpu", "Intel Core i5-14600K", "AMD Ryzen 5 7600"])
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["success"] is False
        assert "JSON object" in data["error"]

    def test_compare_kind_not_string(self, client):
        resp = client.post("/api/compare", json={"kind": 5, "name1": "RTX 4060", "name2": "RX 7600"})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["success"] is False
        assert "kind must be one of" in data["error"]

    def test_compare_numeric_name_coerced(self, client):
        data = client.post("/api/compare", json={
            "kind": "cpu", "name1": 12345, "name2": "AMD Ryzen 5 7600", "provider": "mock",
        }).get_json()
        assert data["success"] is True
        assert data["result"]["cpu1"]["model"] == "12345"

    def test_compare_short_numeric_name_is_field_error(self, client):
        data = client.post("/api/compare", json={
            "kind": "cpu", "name1": 12, "name2": "AMD Ryzen 5 7600", "provider": "mock",
        }).get_json()
        assert data["success"] is False
        assert set(data["field_errors"]) == {"1"}

    def test_unexpected_error_message_is_generic(self, client, monkeypatch):
        def _boom(*args, **kwargs):
            raise RuntimeError("internal detail")

        monkeypatch.setattr("app.run_pipeline", _boom)
        data = client.post("/api/compare", json={
            "kind": "gpu", "name1": "RTX 4060", "name2": "RX 7600", "provider": "mock",
        }).get_json()
        assert data == {"success": False, "error": "An unexpected error occurred."}


def test_healthz(client):
    assert client.get("/healthz").get_json() == {"status": "ok"}
