"""
src/fifo_core/ds/queue.py
Estructura de Datos Persistente: Banker's Queue (Doble Extremo).
Amortized O(1) en ambos extremos, reverse O(1).

Representación física: Queue(front, rear, size)
- front: ConsList en orden de salida (head = próximo en salir por delante).
- rear:  ConsList en orden inverso de entrada (head = último empujado atrás).
Contenido lógico: front ++ reverse(rear).
"""
import logging
from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, List, NamedTuple, Optional, Tuple, TypeVar, Union

from .list import ConsList

logger = logging.getLogger(__name__)

T = TypeVar('T')
U = TypeVar('U')


class PopTag(Enum):
    """Etiqueta de ausencia. No es un error: el llamador debe ramificar."""
    EMPTY = "empty"

    def __repr__(self):
        return "EMPTY"


EMPTY = PopTag.EMPTY


class Value(NamedTuple):
    """Resultado positivo de pop/peek. Permite encolar None sin ambigüedad."""
    item: Any


PopResult = Union[PopTag, Value]


def _rebalance(segment: ConsList, side: str) -> Tuple[ConsList, ConsList]:
    """
    Vuelca un segmento sobre el extremo vacío. Única operación O(N).
    Retorna (kept, moved): 'kept' conserva la mitad más cercana a su extremo,
    'moved' recibe la otra mitad invertida. Con un solo elemento, kept = Nil.
    """
    items = list(segment)
    k = len(items) // 2
    kept = ConsList.from_python(items[:k])
    moved = ConsList.from_reversed(items[k:])
    logger.debug("Rebalance %s: %d items moved, %d kept", side, len(items) - k, k)
    return kept, moved


class AmortizedQueue(Generic[T]):
    """
    Cola FIFO Persistente de doble extremo.
    Implementada con dos ConsLists: Front (Salida) y Rear (Entrada).
    Ninguna operación muta la instancia: todas retornan una cola nueva.

    La igualdad (==) es LÓGICA: compara el contenido materializado, no el
    reparto interno front/rear (dos colas iguales pueden tener reparto distinto).
    """
    __slots__ = ('_front', '_rear', '_size')

    def __init__(self, front: ConsList, rear: ConsList, size: int):
        self._front = front
        self._rear = rear
        self._size = size

    # --- Constructores Estáticos ---
    @staticmethod
    def empty() -> 'AmortizedQueue':
        """Crea una cola vacía."""
        nil = ConsList.nil()
        return AmortizedQueue(nil, nil, 0)

    @staticmethod
    def from_sequence(items: Iterable[T]) -> 'AmortizedQueue[T]':
        """O(N). Todo el contenido va a 'front' en una sola pasada."""
        if not isinstance(items, (list, tuple)):
            items = list(items)
        return AmortizedQueue(ConsList.from_python(items), ConsList.nil(), len(items))

    from_list = from_sequence

    @staticmethod
    def new(iterable: Iterable[T] = (), transform: Optional[Callable[[T], U]] = None) -> 'AmortizedQueue':
        """Construye desde cualquier iterable finito, opcionalmente transformando cada elemento."""
        # Importación Local para evitar ciclos (Queue -> adapters -> Queue)
        from .. import adapters
        if transform is None:
            return adapters.new(iterable)
        return adapters.new_with(iterable, transform)

    # --- Extremos ---
    def push_back(self, item: T) -> 'AmortizedQueue[T]':
        """Añade al final. O(1)."""
        # Añadimos al principio de la lista 'rear' (que actúa como pila de entrada)
        return AmortizedQueue(self._front, ConsList.cons(item, self._rear), self._size + 1)

    def push_front(self, item: T) -> 'AmortizedQueue[T]':
        """Añade al principio. O(1)."""
        return AmortizedQueue(ConsList.cons(item, self._front), self._rear, self._size + 1)

    def pop_front(self) -> Tuple[PopResult, 'AmortizedQueue[T]']:
        """
        Retorna (Value(head), NewQueue).
        Si está vacía, retorna (EMPTY, self).
        Amortizado O(1).
        """
        if self._size == 0:
            return EMPTY, self

        front, rear = self._front, self._rear
        if front.is_empty:
            rear, front = _rebalance(rear, "front")

        return Value(front.head), AmortizedQueue(front.tail, rear, self._size - 1)

    def pop_back(self) -> Tuple[PopResult, 'AmortizedQueue[T]']:
        """Espejo de pop_front. Retorna (Value(last), NewQueue) o (EMPTY, self)."""
        if self._size == 0:
            return EMPTY, self

        front, rear = self._front, self._rear
        if rear.is_empty:
            front, rear = _rebalance(front, "back")

        return Value(rear.head), AmortizedQueue(front, rear.tail, self._size - 1)

    def peek_front(self) -> PopResult:
        """Mira el primer elemento sin sacarlo."""
        if self._size == 0: return EMPTY
        if self._front.is_empty: return Value(self._rear.last())
        return Value(self._front.head)

    def peek_back(self) -> PopResult:
        """Mira el último elemento sin sacarlo."""
        if self._size == 0: return EMPTY
        if self._rear.is_empty: return Value(self._front.last())
        return Value(self._rear.head)

    # --- Operaciones Globales ---
    def reverse(self) -> 'AmortizedQueue[T]':
        """
        O(1). Intercambia los segmentos.
        front ++ reverse(rear) pasa a ser rear ++ reverse(front): el inverso exacto.
        """
        return AmortizedQueue(self._rear, self._front, self._size)

    def join(self, other: 'AmortizedQueue[T]') -> 'AmortizedQueue[T]':
        """
        Retorna self ++ other. O(len(other)).
        El front de self no se toca; el contenido de other se apila sobre self.rear.
        """
        if not isinstance(other, AmortizedQueue):
            raise TypeError(f"Cannot join AmortizedQueue with {type(other)}")
        if other._size == 0: return self

        rear = self._rear
        for item in other:
            rear = ConsList.cons(item, rear)
        return AmortizedQueue(self._front, rear, self._size + other._size)

    def split(self, n: int) -> Tuple['AmortizedQueue[T]', 'AmortizedQueue[T]']:
        """
        Parte la cola en la posición n: (items[:n], items[n:]). O(N).
        n fuera de [0, size] es un error del llamador, no se recorta.
        """
        if not isinstance(n, int):
            raise TypeError(f"Split position must be int, got {type(n)}")
        if n < 0 or n > self._size:
            raise ValueError(f"Split position {n} out of range for queue of size {self._size}")

        items = self.to_list()
        return AmortizedQueue.from_sequence(items[:n]), AmortizedQueue.from_sequence(items[n:])

    def filter(self, predicate: Callable[[T], bool]) -> 'AmortizedQueue[T]':
        """Nueva cola solo con los elementos que cumplen predicate, mismo orden."""
        return AmortizedQueue.from_sequence([item for item in self if predicate(item)])

    def map(self, fn: Callable[[T], U]) -> 'AmortizedQueue[U]':
        return AmortizedQueue.from_sequence([fn(item) for item in self])

    def member(self, item: Any) -> bool:
        """Búsqueda lineal O(N) por igualdad de valor."""
        for x in self:
            if x is item or x == item:
                return True
        return False

    def to_list(self) -> List[T]:
        """Materializa el contenido lógico: front ++ reverse(rear). O(N)."""
        items = list(self._front)
        tail = list(self._rear)
        tail.reverse()
        items.extend(tail)
        return items

    def equal(self, other: 'AmortizedQueue') -> bool:
        """Igualdad lógica, insensible al reparto front/rear."""
        if not isinstance(other, AmortizedQueue):
            return False
        return self.to_list() == other.to_list()

    def size(self) -> int:
        return self._size

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    @staticmethod
    def is_well_formed(value: Any) -> bool:
        return is_queue(value)

    # --- PYTHON MAGIC METHODS ---

    def __iter__(self) -> Iterator[T]:
        """Recorrido lazy desde la cabeza lógica. Reiniciable, no muta la cola."""
        yield from self._front
        if not self._rear.is_empty:
            yield from reversed(list(self._rear))

    def __reversed__(self) -> Iterator[T]:
        yield from self._rear
        if not self._front.is_empty:
            yield from reversed(list(self._front))

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, item: Any) -> bool:
        return self.member(item)

    def __eq__(self, other):
        if not isinstance(other, AmortizedQueue): return NotImplemented
        if self is other: return True
        if self._size != other._size: return False
        for a, b in zip(self, other):
            if not (a is b or a == b):
                return False
        return True

    __hash__ = None

    def __repr__(self):
        # Para debug, mostramos la secuencia lógica completa (O(N))
        from ..adapters import inspect
        return inspect(self)


def _chain_length(segment: Any, bound: int) -> int:
    """Longitud de una cadena ConsList o -1 si no termina en NIL dentro de 'bound' celdas."""
    nil = ConsList.nil()
    count = 0
    curr = segment
    while curr is not nil:
        if not isinstance(curr, ConsList) or count >= bound:
            return -1
        count += 1
        curr = getattr(curr, '_tail', None)
    return count


def is_queue(value: Any) -> bool:
    """
    Predicado de validez para valores que cruzan una frontera no tipada.
    True solo si es una AmortizedQueue con ambos segmentos finitos y bien
    terminados, y con el tamaño cacheado consistente. Nunca lanza.
    """
    if not isinstance(value, AmortizedQueue):
        return False
    front = getattr(value, '_front', None)
    rear = getattr(value, '_rear', None)
    size = getattr(value, '_size', None)
    if type(size) is not int or size < 0:
        return False

    n_front = _chain_length(front, size)
    if n_front < 0:
        return False
    n_rear = _chain_length(rear, size - n_front)
    if n_rear < 0:
        return False
    return n_front + n_rear == size


Queue = AmortizedQueue
