"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_program() -> str:
    """Generate a large G-code program (~10k lines of contour moves)."""
    lines = ["O1000", "G21 G90 G17", "T1 M6", "M3 S12000"]
    for i in range(10_000):
        x = (i % 200) * 0.125
        y = (i // 200) * -0.5
        lines.append(f"N{i + 10} G1 X{x:.3f} Y{y:.3f} Z-1.5 F1200 ; pass {i}")
    lines.append("M30")
    return "\n".join(lines)


@pytest.fixture
def dense_arcs() -> str:
    """One long line of arc moves with the full argument set."""
    return " ".join(
        f"G2 X{i}.5 Y-{i}.25 Z1 I0.5 J-0.5 R2 F300 S900 P1 E0.02" for i in range(2_000)
    )
