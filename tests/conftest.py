"""Shared graph fixtures.

Node labels are chosen so that sorted order gives the indices noted in each
fixture's comment.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from bridgecut.graph.store import build_graph

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def path3():
    # a(0) - b(1) - c(2)
    return build_graph([("a", ["b"]), ("b", ["c"])])


@pytest.fixture
def square():
    #  a(0) ── b(1)
    #   │       │
    #  d(3) ── c(2)
    return build_graph([("a", ["b", "d"]), ("c", ["b", "d"])])


@pytest.fixture
def bowtie():
    #  a(0)        e(4)
    #   │ \        / │
    #   │  c(2)──d(3) │
    #   │ /        \ │
    #  b(1)        f(5)
    return build_graph(
        [
            ("a", ["b", "c"]),
            ("b", ["c"]),
            ("c", ["d"]),
            ("d", ["e", "f"]),
            ("e", ["f"]),
        ]
    )


@pytest.fixture
def two_k4():
    # K4 {a1..a4} (0..3) and K4 {b1..b4} (4..7), bridge a4(3) - b1(4)
    left = ["a1", "a2", "a3", "a4"]
    right = ["b1", "b2", "b3", "b4"]
    records = []
    for group in (left, right):
        for i, label in enumerate(group):
            records.append((label, group[i + 1 :]))
    records.append(("a4", ["b1"]))
    return build_graph(records)


@pytest.fixture
def two_k5_triple_bridge():
    # K5 {p0..p4} (0..4) and K5 {q0..q4} (5..9) joined by p0-q0, p1-q1, p2-q2
    left = [f"p{i}" for i in range(5)]
    right = [f"q{i}" for i in range(5)]
    records = []
    for group in (left, right):
        for i, label in enumerate(group):
            records.append((label, group[i + 1 :]))
    records.extend((left[i], [right[i]]) for i in range(3))
    return build_graph(records)
