"""
Simple system to debug solver internals via process output messages
"""

from __future__ import annotations

import functools

from .constants import DEBUG_ENV

__all__ = ["check_debug_enabled"]


@functools.cache
def check_debug_enabled() -> bool:
    """
    Check whether debugging is enabled by reading the environment
    variable ``LAPCORE_DEBUG``.
    """
    from unipercept.config.env import get_env

    return get_env(bool, DEBUG_ENV, default=False)
