"""
src/fifo_core/adapters.py
Capa única de adaptadores hacia el exterior:
construcción desde iterables, transformación, volcado (into) e impresión.
"""
from typing import Callable, Iterable, TypeVar

from .ds.builder import collect
from .ds.queue import AmortizedQueue
from .invariants import QUEUE_DISPLAY_NAME

T = TypeVar('T')
U = TypeVar('U')


def new(iterable: Iterable[T] = ()) -> AmortizedQueue[T]:
    """Cola con el orden de iteración del origen."""
    return collect(iterable)


def new_with(iterable: Iterable[T], transform: Callable[[T], U]) -> AmortizedQueue[U]:
    """Como new(), aplicando transform a cada elemento antes de insertarlo."""
    return collect(transform(item) for item in iterable)


def into(iterable: Iterable[T], queue: AmortizedQueue) -> AmortizedQueue:
    """Vuelca el iterable DETRÁS del contenido actual de 'queue'."""
    if not isinstance(queue, AmortizedQueue):
        raise TypeError(f"Cannot collect into {type(queue)}")
    return collect(iterable, queue)


def inspect(queue: AmortizedQueue, name: str = QUEUE_DISPLAY_NAME) -> str:
    """
    Forma textual de diagnóstico: Name<[1, 2, 3]>.
    No es un formato persistente ni parseable.
    """
    return f"{name}<[{', '.join(repr(item) for item in queue)}]>"
