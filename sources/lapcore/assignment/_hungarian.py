"""
PyTorch implementation of the Hungarian algorithm for solving the assignment problem.

The solver follows the Kuhn-Munkres method with dual potentials, growing the
matching one row at a time along shortest augmenting paths.
"""

from __future__ import annotations

import torch
from torch import Tensor

from ..constants import UNASSIGNED

__all__ = ["hungarian_solve"]


@torch.no_grad()
def hungarian_solve(cost: Tensor) -> Tensor:
    r"""
    Find a minimum cost perfect matching on a square cost matrix.

    Parameters
    ----------
    cost
        Square cost matrix (S x S) with finite entries.

    Returns
    -------
        Tensor[S + 1] mapping each column to its matched row. The trailing slot
        is the virtual source column that seeds every augmenting search.
    """
    size = cost.shape[0]
    cost = cost.to(dtype=torch.float64)

    source = size  # virtual column
    u = torch.zeros(size, dtype=torch.float64)
    v = torch.zeros(size + 1, dtype=torch.float64)
    p = torch.full((size + 1,), UNASSIGNED, dtype=torch.long)
    way = torch.full((size + 1,), source, dtype=torch.long)

    for row in range(size):
        p[source] = row
        col = source

        min_reduced = torch.full((size,), torch.inf, dtype=torch.float64)
        visited = torch.zeros(size + 1, dtype=torch.bool)

        # Grow the alternating tree until a free column is reached
        while True:
            visited[col] = True
            i0 = int(p[col])

            free = ~visited[:size]
            reduced = cost[i0] - u[i0] - v[:size]
            improved = free & (reduced < min_reduced)
            min_reduced = torch.where(improved, reduced, min_reduced)
            way[:size].masked_fill_(improved, col)

            delta, next_col = min_reduced.masked_fill(~free, torch.inf).min(dim=0)

            tree = visited.nonzero().flatten()
            u[p[tree]] += delta
            v[tree] -= delta
            min_reduced = torch.where(free, min_reduced - delta, min_reduced)

            col = int(next_col)
            if p[col] == UNASSIGNED:
                break

        # Flip the matching along the augmenting path
        while col != source:
            prev = int(way[col])
            p[col] = p[prev]
            col = prev

    return p
