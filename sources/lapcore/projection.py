r"""
Maps a solution of the padded square problem back onto the original
:math:`N \times M` problem.
"""

from __future__ import annotations

import torch
from torch import Tensor

from .constants import UNASSIGNED

__all__ = ["project_assignment"]


def project_assignment(p: Tensor, rows: int, cols: int) -> Tensor:
    """
    Invert the column-to-row match map, restricted to the original rows and
    columns.

    Parameters
    ----------
    p
        Match map of the padded problem, where ``p[j]`` is the row matched to
        column ``j``. Slots beyond the padded size are ignored.
    rows, cols
        Dimensions of the original cost matrix.

    Returns
    -------
        Tensor[N] where entry ``i`` is the column assigned to row ``i``, or
        ``-1`` when the row was matched to a dummy column.
    """
    result = torch.full((rows,), UNASSIGNED, dtype=torch.long)

    owners = p[:cols].long()
    keep = (owners >= 0) & (owners < rows)
    result[owners[keep]] = torch.arange(cols, dtype=torch.long)[keep]

    return result
