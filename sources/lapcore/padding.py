r"""
Builds the zero-padded square cost matrix that the solver operates on.

A rectangular :math:`N \times M` problem is turned into a square
:math:`S \times S` problem with :math:`S = \max(N, M)` by adding dummy rows or
columns of cost zero. Assigning a real row to a dummy column then means that
the row stays unassigned in the original problem.
"""

from __future__ import annotations

import itertools
import typing as T

import torch
from torch import Tensor

from .constants import PARALLEL_THRESHOLD
from .debug import check_debug_enabled
from .workers import WorkerPool, current_pool, worker_count

__all__ = ["build_padded_matrix", "build_padded_rows", "split_rows"]


def build_padded_rows(source: Tensor, start: int, stop: int, size: int) -> Tensor:
    """
    Build rows ``start`` up to ``stop`` of the padded matrix.

    Parameters
    ----------
    source
        Original cost matrix of shape (N, M).
    start, stop
        Row range of the padded matrix to produce.
    size
        Side length of the padded matrix.

    Returns
    -------
        Tensor of shape ``(stop - start, size)``.
    """
    rows, cols = source.shape
    block = torch.zeros((stop - start, size), dtype=torch.float64)

    # Rows at or beyond N are dummy rows and stay zero
    end = min(stop, rows)
    if start < end and cols > 0:
        block[: end - start, :cols] = source[start:end]

    return block


def split_rows(size: int, parts: int) -> list[tuple[int, int]]:
    """
    Split ``range(size)`` into at most ``parts`` contiguous, disjoint ranges.
    """
    if size <= 0:
        return []
    step = -(-size // max(1, parts))
    return [(start, min(start + step, size)) for start in range(0, size, step)]


def build_padded_matrix(
    cost: T.Any, rows: int, cols: int, pool: WorkerPool | None = None
) -> Tensor:
    """
    Normalize a flat, row-major cost matrix into a square matrix of side
    ``max(rows, cols)`` by zero padding.

    Large matrices are built in disjoint row blocks distributed over the
    executor of ``pool``. Small matrices, and pools without an executor or
    with a single worker, are filled with one slice copy that runs on the
    PyTorch intra-op threads. Both strategies yield identical output.

    Parameters
    ----------
    cost
        Flat sequence, array or tensor of ``rows * cols`` values.
    rows, cols
        Dimensions of the original matrix.
    pool
        Worker pool to use for the parallel strategy. Defaults to the
        PyTorch thread pool.

    Returns
    -------
        Tensor[S, S] with dtype ``float64``.
    """
    size = max(rows, cols)
    source = torch.as_tensor(cost, dtype=torch.float64, device="cpu").reshape(
        rows, cols
    )

    if pool is None:
        pool = current_pool()
    workers = worker_count(pool)

    if size > PARALLEL_THRESHOLD and workers > 1 and pool.executor is not None:
        ranges = split_rows(size, workers)
        if check_debug_enabled():
            print(
                f"Padding {rows}x{cols} cost matrix to {size}x{size} "
                f"in {len(ranges)} row blocks ({workers} workers)"
            )
        starts, stops = zip(*ranges)
        blocks = pool.map(
            build_padded_rows,
            itertools.repeat(source),
            starts,
            stops,
            itertools.repeat(size),
        )
        return torch.cat(blocks, dim=0)

    if check_debug_enabled():
        print(f"Padding {rows}x{cols} cost matrix to {size}x{size} in one block")
    return build_padded_rows(source, 0, size, size)
