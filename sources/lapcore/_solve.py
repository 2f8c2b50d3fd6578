r"""
Boundary entry points that solve a cost matrix handed over by an external
caller, e.g. a UI or an orchestration layer.
"""

from __future__ import annotations

import typing as T

import numpy as np
import numpy.typing as NP
import torch
from torch import Tensor

from .assignment import hungarian_solve
from .constants import UNASSIGNED
from .debug import check_debug_enabled
from .errors import DimensionMismatch, NonFiniteValue
from .padding import build_padded_matrix
from .projection import project_assignment
from .workers import WorkerPool

__all__ = ["solve", "solve_matrix", "validate_cost"]


def _as_dimension(value: T.Any, name: str) -> int:
    try:
        dim = int(value)
    except (TypeError, ValueError, OverflowError):
        dim = None
    if dim is None or dim != value:
        msg = f"Dimension {name} must be a whole number, got {value!r}"
        raise DimensionMismatch(msg)
    return dim


def validate_cost(cost: T.Any, rows: int, cols: int) -> Tensor:
    """
    Check the preconditions of :func:`solve` and return the costs as a flat
    ``float64`` tensor.

    Raises
    ------
    DimensionMismatch
        If the number of entries is not ``rows * cols``.
    NonFiniteValue
        If any entry is NaN or infinite.
    """
    if rows < 0 or cols < 0:
        msg = f"Dimensions must be non-negative, got {rows} x {cols}"
        raise DimensionMismatch(msg)

    values = torch.as_tensor(cost, dtype=torch.float64, device="cpu")
    values = values.detach().flatten()

    if values.numel() != rows * cols:
        msg = (
            f"Cost matrix has {values.numel()} entries, expected "
            f"{rows} * {cols} = {rows * cols}"
        )
        raise DimensionMismatch(msg)

    bad = (~torch.isfinite(values)).nonzero().flatten()
    if bad.numel() > 0:
        index = int(bad[0])
        raise NonFiniteValue(index, values[index].item())

    return values


def solve(
    cost: T.Any, rows: int, cols: int, *, pool: WorkerPool | None = None
) -> NP.NDArray[np.int32]:
    """
    Solve the linear assignment problem over a flat, row-major cost matrix.

    Parameters
    ----------
    cost
        Sequence, array or tensor of ``rows * cols`` finite costs.
    rows, cols
        Dimensions of the cost matrix.
    pool
        Externally owned worker pool used to build the padded matrix. Defaults
        to the PyTorch thread pool.

    Returns
    -------
        Array of length ``rows`` where entry ``i`` is the column assigned to
        row ``i``, or ``-1`` if the row is left unassigned.
    """
    rows, cols = _as_dimension(rows, "rows"), _as_dimension(cols, "cols")
    values = validate_cost(cost, rows, cols)

    if rows == 0:
        return np.empty(0, dtype=np.int32)
    if cols == 0:
        return np.full(rows, UNASSIGNED, dtype=np.int32)

    padded = build_padded_matrix(values, rows, cols, pool)
    p = hungarian_solve(padded)
    result = project_assignment(p, rows, cols)

    if check_debug_enabled():
        assigned = (result != UNASSIGNED).sum().item()
        print(f"Solved {rows}x{cols} cost matrix: {assigned} of {rows} rows assigned")

    return result.numpy().astype(np.int32)


def solve_matrix(
    cost_matrix: T.Any, *, pool: WorkerPool | None = None
) -> NP.NDArray[np.int32]:
    """
    Solve a two-dimensional cost matrix, given as nested sequences, an array or
    a tensor. See :func:`solve`.
    """
    matrix = torch.as_tensor(cost_matrix, dtype=torch.float64, device="cpu")
    if matrix.numel() == 0 and matrix.ndim < 2:
        return np.empty(0, dtype=np.int32)
    if matrix.ndim != 2:
        msg = f"Expected a two-dimensional cost matrix, got shape {tuple(matrix.shape)}"
        raise DimensionMismatch(msg)

    rows, cols = matrix.shape
    return solve(matrix.flatten(), rows, cols, pool=pool)
