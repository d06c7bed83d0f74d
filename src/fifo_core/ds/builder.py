"""
src/fifo_core/ds/builder.py
Acumulador por lotes (Collectable).
Recoge elementos en un buffer inverso O(1) y los vuelca en la cola con un único join.
"""
import logging
from typing import Generic, Iterable, Optional, TypeVar

from .list import ConsList
from .queue import AmortizedQueue

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BatchBuilder(Generic[T]):
    """
    Acumulador persistente.
    Buffer: ConsList con los elementos en orden INVERSO de llegada.
    Abandonar un acumulador (halt) no requiere limpieza: no produce cola ni efectos.
    """
    __slots__ = ('_buffer', '_count')

    def __init__(self, buffer: ConsList, count: int):
        self._buffer = buffer
        self._count = count

    @staticmethod
    def start() -> 'BatchBuilder':
        return BatchBuilder(ConsList.nil(), 0)

    def accept(self, item: T) -> 'BatchBuilder[T]':
        """O(1). Prepend al buffer."""
        return BatchBuilder(ConsList.cons(item, self._buffer), self._count + 1)

    def finish(self, existing: Optional[AmortizedQueue] = None) -> AmortizedQueue[T]:
        """
        Un solo volcado O(N) + un join.
        Los elementos de 'existing' preceden a los acumulados.
        """
        if existing is None:
            existing = AmortizedQueue.empty()
        if self._count == 0:
            return existing

        logger.debug("Batch finish: %d items joined onto queue of size %d", self._count, len(existing))
        batch = AmortizedQueue.from_sequence(list(self._buffer.reverse()))
        if existing.is_empty:
            return batch
        return existing.join(batch)

    def __len__(self) -> int:
        return self._count

    def __repr__(self):
        return f"BatchBuilder(count={self._count})"


def collect(iterable: Iterable[T], existing: Optional[AmortizedQueue] = None) -> AmortizedQueue[T]:
    """Ejecuta el ciclo start/accept/finish completo sobre un iterable finito."""
    acc = BatchBuilder.start()
    for item in iterable:
        acc = acc.accept(item)
    return acc.finish(existing)
