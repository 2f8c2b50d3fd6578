r"""
Common set-up for all tests.

Defines fixtures for worker pools and cost matrices.
"""

from __future__ import annotations

import itertools
import typing as T
from concurrent.futures import ThreadPoolExecutor

import pytest
import torch

from lapcore import WorkerPool


def brute_force_minimum(cost: torch.Tensor) -> float:
    """
    Minimum total over all perfect matchings of the zero-padded square matrix,
    found by exhaustive search.
    """
    rows, cols = cost.shape
    size = max(rows, cols)
    padded = torch.zeros((size, size), dtype=torch.float64)
    padded[:rows, :cols] = cost

    values = padded.tolist()
    best = float("inf")
    for perm in itertools.permutations(range(size)):
        total = sum(values[i][j] for i, j in enumerate(perm))
        best = min(best, total)
    return 0.0 if size == 0 else best


def assignment_total(cost: torch.Tensor, result: T.Sequence[int]) -> float:
    return sum(cost[i, j].item() for i, j in enumerate(result) if j >= 0)


@pytest.fixture(scope="module")
def thread_executor():
    with ThreadPoolExecutor(max_workers=4) as executor:
        yield executor


@pytest.fixture(
    params=["single", "threads", "executor"],
    ids=("pool:single", "pool:threads", "pool:executor"),
)
def worker_pool(request, thread_executor) -> WorkerPool:
    if request.param == "single":
        return WorkerPool(1)
    if request.param == "threads":
        return WorkerPool(3)
    return WorkerPool(4, thread_executor)
