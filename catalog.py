"""
Static hardware catalog: known model names for suggestions, example presets and
per-attribute tooltips. No network, no files.
"""

from __future__ import annotations

from dataclasses import dataclass

from config import MAX_SUGGESTIONS

CPU_MODEL_NAMES = (
    # Intel 14th Gen
    "Intel Core i9-14900K",
    "Intel Core i7-14700K",
    "Intel Core i5-14600K",
    "Intel Core i3-14100",
    # Intel 13th Gen
    "Intel Core i9-13900K",
    "Intel Core i7-13700K",
    "Intel Core i5-13600K",
    "Intel Core i3-13100",
    # AMD Ryzen 7000
    "AMD Ryzen 9 7950X3D",
    "AMD Ryzen 9 7950X",
    "AMD Ryzen 9 7900X3D",
    "AMD Ryzen 9 7900X",
    "AMD Ryzen 7 7800X3D",
    "AMD Ryzen 7 7700X",
    "AMD Ryzen 5 7600X",
    "AMD Ryzen 5 7600",
    # AMD Ryzen 5000
    "AMD Ryzen 9 5950X",
    "AMD Ryzen 9 5900X",
    "AMD Ryzen 7 5800X3D",
    "AMD Ryzen 7 5800X",
    "AMD Ryzen 5 5600X",
)

GPU_MODEL_NAMES = (
    # NVIDIA 40 series
    "NVIDIA GeForce RTX 4090",
    "NVIDIA GeForce RTX 4080 Super",
    "NVIDIA GeForce RTX 4080",
    "NVIDIA GeForce RTX 4070 Ti Super",
    "NVIDIA GeForce RTX 4070 Ti",
    "NVIDIA GeForce RTX 4070 Super",
    "NVIDIA GeForce RTX 4070",
    "NVIDIA GeForce RTX 4060 Ti",
    "NVIDIA GeForce RTX 4060",
    # NVIDIA 30 series
    "NVIDIA GeForce RTX 3090 Ti",
    "NVIDIA GeForce RTX 3090",
    "NVIDIA GeForce RTX 3080 Ti",
    "NVIDIA GeForce RTX 3080",
    "NVIDIA GeForce RTX 3070 Ti",
    "NVIDIA GeForce RTX 3070",
    "NVIDIA GeForce RTX 3060 Ti",
    "NVIDIA GeForce RTX 3060",
    # AMD 7000 series
    "AMD Radeon RX 7900 XTX",
    "AMD Radeon RX 7900 XT",
    "AMD Radeon RX 7800 XT",
    "AMD Radeon RX 7700 XT",
    "AMD Radeon RX 7600",
    # AMD 6000 series
    "AMD Radeon RX 6950 XT",
    "AMD Radeon RX 6900 XT",
    "AMD Radeon RX 6800 XT",
    "AMD Radeon RX 6800",
    "AMD Radeon RX 6700 XT",
    "AMD Radeon RX 6600 XT",
)

MODEL_NAMES = {"cpu": CPU_MODEL_NAMES, "gpu": GPU_MODEL_NAMES}

DEFAULT_NAMES = {
    "cpu": ("Intel Core i9-14900K", "AMD Ryzen 9 7950X"),
    "gpu": ("NVIDIA GeForce RTX 4090", "AMD Radeon RX 7900 XTX"),
}


@dataclass
class Preset:
    id: str
    kind: str
    label: str
    name1: str
    name2: str


PRESETS = (
    Preset("cpu-high", "cpu", "i9-14900K vs 7950X", "Intel Core i9-14900K", "AMD Ryzen 9 7950X"),
    Preset("cpu-mid", "cpu", "i5-14600K vs 7800X3D", "Intel Core i5-14600K", "AMD Ryzen 7 7800X3D"),
    Preset("cpu-budget", "cpu", "i3-14100 vs 7600", "Intel Core i3-14100", "AMD Ryzen 5 7600"),
    Preset("gpu-high", "gpu", "RTX 4090 vs 7900 XTX", "NVIDIA GeForce RTX 4090", "AMD Radeon RX 7900 XTX"),
    Preset("gpu-mid", "gpu", "RTX 4070 Super vs 7800 XT", "NVIDIA GeForce RTX 4070 Super", "AMD Radeon RX 7800 XT"),
    Preset("gpu-budget", "gpu", "RTX 4060 vs 7600", "NVIDIA GeForce RTX 4060", "AMD Radeon RX 7600"),
)


def presets_for(kind: str) -> list[Preset]:
    return [p for p in PRESETS if p.kind == kind]


def find_preset(preset_id: str) -> Preset | None:
    return next((p for p in PRESETS if p.id == preset_id), None)


def suggest(kind: str, text: str, limit: int = MAX_SUGGESTIONS) -> list[str]:
    """Case-insensitive substring match against the catalog, catalog order, capped at limit."""
    needle = (text or "").lower()
    if not needle:
        return []
    names = MODEL_NAMES.get(kind, ())
    return [n for n in names if needle in n.lower()][:limit]


SPEC_TOOLTIPS = {
    # CPU
    "cores": "The number of physical processing units. More cores generally mean better performance in multi-threaded tasks like video editing and 3D rendering.",
    "threads": "The number of independent processes a CPU can handle at once. Often double the core count with hyper-threading technology.",
    "boostClock": "The maximum clock speed reached under load for a short duration. Higher is better for gaming and responsive applications.",
    "baseClock": "The standard operating speed of the CPU when not under heavy load.",
    "l3Cache": "High-speed memory on the CPU that stores frequently accessed data. Larger L3 caches can significantly improve gaming performance.",
    "tdp": "Thermal Design Power. An indicator of heat output, which also relates to power consumption. A lower TDP is more power-efficient.",
    "idlePower": "Power consumed when the component is not under significant load (e.g. at the desktop). Lower is better for energy efficiency.",
    "peakPower": "Maximum power consumed under heavy load such as gaming or stress testing. Important for choosing a PSU and cooling. Lower is more power-efficient.",
    "socket": "The physical connector on the motherboard that the CPU plugs into. CPU and motherboard must have a matching socket.",
    "integratedGraphics": "A graphics processor built into the CPU for basic display output and light tasks without a separate graphics card.",
    "releaseDate": "The date when the component was first released to the market.",
    "cinebenchR23MultiCore": "Cinebench R23 multi-core rendering score. Higher indicates better performance for professional workloads.",
    "cinebenchR23SingleCore": "Cinebench R23 single-core score. Higher matters for gaming and general application responsiveness.",
    # GPU
    "vram": "Video RAM. Dedicated memory for textures and frame buffers. More is better for higher resolutions and detailed textures.",
    "memoryType": "The type of memory used by the GPU, such as GDDR6 or GDDR6X. Newer types are generally faster.",
    "architecture": "The underlying design and technology generation of the GPU (e.g. NVIDIA Ada Lovelace, AMD RDNA 3).",
    "timeSpyGraphicsScore": "3DMark Time Spy graphics score, DirectX 12 gaming performance at 1440p. Higher is better.",
    "portRoyalRayTracingScore": "3DMark Port Royal score for real-time ray tracing performance. Higher is better.",
}
