"""
Shared fixtures: synthetic collaborator payloads and fake SDK clients.
"""

import copy
import json
from types import SimpleNamespace

import pytest


CPU_PAYLOAD = {
    "cpu1": {
        "model": "Intel Core i9-14900K",
        "cores": 24,
        "threads": 32,
        "baseClock": "3.2 GHz",
        "boostClock": "6.0 GHz",
        "tdp": "125W",
        "idlePower": "12W",
        "peakPower": "253W",
        "l3Cache": "36MB",
        "socket": "LGA 1700",
        "integratedGraphics": "Intel UHD Graphics 770",
        "releaseDate": "Q4 2023",
        "cinebenchR23MultiCore": "40,100",
        "cinebenchR23SingleCore": "2,300",
    },
    "cpu2": {
        "model": "AMD Ryzen 9 7950X",
        "cores": 16,
        "threads": 32,
        "baseClock": "4.5 GHz",
        "boostClock": "5.7 GHz",
        "tdp": "170W",
        "idlePower": "N/A",
        "peakPower": "230W",
        "l3Cache": "64MB",
        "socket": "AM5",
        "integratedGraphics": "AMD Radeon Graphics",
        "releaseDate": "Q3 2022",
        "cinebenchR23MultiCore": "38,000",
        "cinebenchR23SingleCore": "2,050",
    },
    "summary": {
        "performanceWinner": "cpu1",
        "valueWinner": "cpu2",
        "gamingWinner": "tie",
        "overallRecommendation": "Both are flagship parts; pick by platform.",
    },
}

GPU_PAYLOAD = {
    "gpu1": {
        "model": "NVIDIA GeForce RTX 4090",
        "vram": "24 GB",
        "memoryType": "GDDR6X",
        "boostClock": "2520 MHz",
        "tdp": "450W",
        "idlePower": "21W",
        "peakPower": "411W",
        "architecture": "Ada Lovelace",
        "releaseDate": "October 2022",
        "timeSpyGraphicsScore": "36,000",
        "portRoyalRayTracingScore": "25,000",
    },
    "gpu2": {
        "model": "AMD Radeon RX 7900 XTX",
        "vram": "24 GB",
        "memoryType": "GDDR6",
        "boostClock": "2500 MHz",
        "tdp": "355W",
        "idlePower": "17W",
        "peakPower": "356W",
        "architecture": "RDNA 3",
        "releaseDate": "December 2022",
        "timeSpyGraphicsScore": "30,000",
        "portRoyalRayTracingScore": "16,000",
    },
    "summary": {
        "performanceWinner": "gpu1",
        "valueWinner": "gpu2",
        "gamingWinner": "gpu1",
        "overallRecommendation": "The 4090 is faster at 4K; the XTX is the better value at 1440p.",
    },
}


@pytest.fixture
def cpu_payload():
    return copy.deepcopy(CPU_PAYLOAD)


@pytest.fixture
def gpu_payload():
    return copy.deepcopy(GPU_PAYLOAD)


class FakeOpenAI:
    """Stands in for openai.OpenAI: records create() calls, returns canned text or raises."""

    def __init__(self, text="", error=None):
        self.calls = []
        self._text = text
        self._error = error
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        message = SimpleNamespace(content=self._text)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeAnthropic:
    """Stands in for anthropic.Anthropic: messages.create() returns text blocks."""

    def __init__(self, text="", error=None):
        self.calls = []
        self._text = text
        self._error = error
        self.messages = SimpleNamespace(create=self._create)

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        return SimpleNamespace(content=[SimpleNamespace(type="text", text=self._text)])


@pytest.fixture
def fake_openai():
    def _make(payload=None, text=None, error=None):
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        return FakeOpenAI(text=text, error=error)

    return _make


@pytest.fixture
def fake_anthropic():
    def _make(payload=None, text=None, error=None):
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        return FakeAnthropic(text=text, error=error)

    return _make
