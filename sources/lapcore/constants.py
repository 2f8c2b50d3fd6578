from __future__ import annotations

from typing import Final

PARALLEL_THRESHOLD: Final = 50
UNASSIGNED: Final = -1
DEBUG_ENV: Final = "LAPCORE_DEBUG"
