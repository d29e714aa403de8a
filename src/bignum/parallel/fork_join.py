"""
Fork-Join Pool — общий пул потоков для divide-and-conquer задач

join(left, right):
1. left отправляется в пул (fork)
2. right выполняется в вызывающем потоке
3. если left ещё в очереди, он отменяется и выполняется здесь же
   (helping, аналог work-stealing), иначе вызывающий поток ждёт его

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ожидание возможно только на уже запущенной задаче, поэтому вложенные
   join не блокируют пул ограниченного размера (нет deadlock)
2. Ветви не разделяют изменяемое состояние; результат собирается только
   после завершения обеих ветвей
3. Исключение любой ветви пробрасывается в вызывающий поток; если упала
   ветвь right, уже запущенная left дожидается завершения, её результат
   отбрасывается
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, Optional, TypeVar

from src.bignum.infrastructure.logging import get_logger

logger = get_logger(__name__)

L = TypeVar("L")
R = TypeVar("R")


class ForkJoinPool:
    """
    Пул потоков с fork-join дисциплиной.

    Пул является единственным разделяемым ресурсом: он только распределяет работу
    и не хранит данных вычисления.
    """

    def __init__(self, max_workers: Optional[int] = None):
        """
        Args:
            max_workers: Число потоков (None: значение по умолчанию
                ThreadPoolExecutor)

        Raises:
            ValueError: Если max_workers < 1
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="bignum-fork-join",
        )
        self.max_workers = max_workers
        logger.debug("Fork-join pool started (max_workers=%s)", max_workers)

    def join(self, left: Callable[[], L], right: Callable[[], R]) -> tuple[L, R]:
        """
        Выполнение двух независимых вычислений и ожидание обоих.

        Args:
            left: Вычисление, отправляемое в пул
            right: Вычисление, выполняемое в текущем потоке

        Returns:
            (left(), right())
        """
        future = self._executor.submit(left)
        try:
            right_result = right()
        except BaseException:
            # запущенная ветвь left завершается до выхода из join
            if not future.cancel():
                future.exception()
            raise

        if future.cancel():
            left_result = left()
        else:
            left_result = future.result()

        return left_result, right_result

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "ForkJoinPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)


# =============================================================================
# ОБЩИЕ ПУЛЫ
# =============================================================================

_WORKER_POOLS: Dict[Optional[int], ForkJoinPool] = {}
_WORKER_POOLS_LOCK = threading.Lock()


def get_worker_pool(max_workers: Optional[int] = None) -> ForkJoinPool:
    """
    Общий пул процесса (один экземпляр на размер).

    Пулы живут до shutdown_worker_pools(); следующий вызов после него
    создаёт новый пул.

    Args:
        max_workers: Размер пула (None: по умолчанию)
    """
    with _WORKER_POOLS_LOCK:
        pool = _WORKER_POOLS.get(max_workers)
        if pool is None:
            pool = ForkJoinPool(max_workers=max_workers)
            _WORKER_POOLS[max_workers] = pool
        return pool


def shutdown_worker_pools(wait: bool = True) -> None:
    """Закрытие всех общих пулов, созданных get_worker_pool()."""
    with _WORKER_POOLS_LOCK:
        pools = list(_WORKER_POOLS.values())
        _WORKER_POOLS.clear()

    for pool in pools:
        pool.shutdown(wait=wait)
    logger.debug("Shut down %d shared fork-join pool(s)", len(pools))
