"""
This package implements the solver for a Linear Assignment Problem (LAP), 
where the minimum cost must be computed over a square cost-matrix.
"""

from __future__ import annotations

from ._hungarian import *
