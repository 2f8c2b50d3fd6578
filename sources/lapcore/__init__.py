r"""
LapCore
=======

This module solves the linear assignment problem: given a cost for every
(row, column) pairing, find a one-to-one matching of rows to columns that
minimizes the total cost.

.. math::

    \min_{\sigma} \sum_i C_{i, \sigma(i)}

Rectangular matrices are padded with zero-cost dummy rows or columns, so that
every call is reduced to a square problem.

Terminology
-----------

- **Potentials**: Per-row and per-column dual values. Cost minus potentials
    stays non-negative, which certifies that the current partial matching is
    optimal.

- **Reduced cost**: The cost of a pairing adjusted by the current potentials.

- **Augmenting path**: A path through matched and unmatched columns that grows
    the matching by one row without breaking optimality.

- **Padding**: Dummy rows or columns of cost zero that make the matrix square.
"""

from __future__ import annotations

__version__ = "1.0.0"

from . import assignment, constants, debug, errors
from ._solve import *
from .errors import *
from .padding import *
from .projection import *
from .workers import *
