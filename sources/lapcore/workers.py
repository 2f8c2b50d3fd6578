r"""
Read-only view on the worker pool that the hosting runtime makes available.

The pool is never created, resized or shut down here. By default it is the
PyTorch intra-op thread pool, which the host sizes through
:func:`torch.set_num_threads`. A host that owns a
:class:`concurrent.futures.Executor` can hand it in explicitly by wrapping it
in a :class:`WorkerPool`.
"""

from __future__ import annotations

import typing as T
from concurrent.futures import Executor

import torch

from .constants import PARALLEL_THRESHOLD
from .debug import check_debug_enabled

__all__ = [
    "WorkerPool",
    "current_pool",
    "threads_available",
    "worker_count",
    "runtime_status",
]

_R = T.TypeVar("_R")


class WorkerPool(T.NamedTuple):
    """
    Handle on an externally owned pool of workers.

    Attributes
    ----------
    workers
        Number of workers that may be used concurrently.
    executor
        Optional executor to submit tasks to. When absent, tasks run one after
        another on the calling thread.
    """

    workers: int
    executor: Executor | None = None

    def map(self, fn: T.Callable[..., _R], *iterables: T.Iterable) -> list[_R]:
        """
        Run ``fn`` over the zipped iterables and return the results in input
        order, regardless of the order in which tasks complete.
        """
        if self.executor is not None:
            return list(self.executor.map(fn, *iterables))

        return [fn(*args) for args in zip(*iterables)]


def current_pool() -> WorkerPool:
    """
    Pool that reflects the thread count currently configured in PyTorch. It has
    no executor: work handed to it runs on PyTorch's own intra-op threads.
    """
    return WorkerPool(max(1, torch.get_num_threads()))


def worker_count(pool: WorkerPool | None = None) -> int:
    """
    Number of workers currently usable.
    """
    if pool is None:
        pool = current_pool()
    return max(0, int(pool.workers))


def threads_available(pool: WorkerPool | None = None) -> bool:
    """
    Whether more than one worker is currently usable.
    """
    return worker_count(pool) > 1


def runtime_status(pool: WorkerPool | None = None) -> dict[str, T.Any]:
    """
    Snapshot of the ambient runtime configuration, for diagnostics.
    """
    return {
        "threaded": threads_available(pool),
        "workers": worker_count(pool),
        "executor": pool is not None and pool.executor is not None,
        "parallel_threshold": PARALLEL_THRESHOLD,
        "debug": check_debug_enabled(),
    }
