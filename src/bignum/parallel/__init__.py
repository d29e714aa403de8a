"""Parallel: fork-join пул потоков для Karatsuba."""

from .fork_join import ForkJoinPool, get_worker_pool, shutdown_worker_pools

__all__ = [
    "ForkJoinPool",
    "get_worker_pool",
    "shutdown_worker_pools",
]
