"""
src/fifo_core/fifo.py
Facade FIFO: API renombrada con la cola como primer argumento.
Cada función delega en AmortizedQueue; aquí no vive lógica propia.

    >>> q = push(push(new(), 1), 2)
    >>> inspect(q)
    'FIFO<[1, 2]>'
"""
from typing import Any, Callable, Iterable, List, Optional, Tuple

from . import adapters
from .ds.queue import AmortizedQueue, PopResult
from .ds.queue import is_queue as _is_queue
from .invariants import FIFO_DISPLAY_NAME


def new(iterable: Iterable = (), transform: Optional[Callable] = None) -> AmortizedQueue:
    if transform is None:
        return adapters.new(iterable)
    return adapters.new_with(iterable, transform)


def from_list(items: list) -> AmortizedQueue:
    if not isinstance(items, list):
        raise TypeError(f"from_list expects a list, got {type(items)}")
    return AmortizedQueue.from_sequence(items)


def equal(queue1: AmortizedQueue, queue2: AmortizedQueue) -> bool:
    """True si ambas colas tienen los mismos elementos en el mismo orden."""
    return queue1.equal(queue2)


def filter(queue: AmortizedQueue, func: Callable[[Any], bool]) -> AmortizedQueue:
    return queue.filter(func)


def to_list(queue: AmortizedQueue) -> List:
    return queue.to_list()


def push(queue: AmortizedQueue, item: Any) -> AmortizedQueue:
    """Encola al final."""
    return queue.push_back(item)


def push_r(queue: AmortizedQueue, item: Any) -> AmortizedQueue:
    """Encola al principio."""
    return queue.push_front(item)


def is_empty(queue: AmortizedQueue) -> bool:
    return queue.is_empty


def is_queue(value: Any) -> bool:
    return _is_queue(value)


def join(queue1: AmortizedQueue, queue2: AmortizedQueue) -> AmortizedQueue:
    """queue1 queda delante de queue2."""
    return queue1.join(queue2)


def length(queue: AmortizedQueue) -> int:
    return queue.size()


def member(queue: AmortizedQueue, item: Any) -> bool:
    return queue.member(item)


def pop(queue: AmortizedQueue) -> Tuple[PopResult, AmortizedQueue]:
    return queue.pop_front()


def pop_r(queue: AmortizedQueue) -> Tuple[PopResult, AmortizedQueue]:
    return queue.pop_back()


def reverse(queue: AmortizedQueue) -> AmortizedQueue:
    return queue.reverse()


def split(queue: AmortizedQueue, n: int) -> Tuple[AmortizedQueue, AmortizedQueue]:
    return queue.split(n)


def inspect(queue: AmortizedQueue) -> str:
    return adapters.inspect(queue, FIFO_DISPLAY_NAME)
