"""
src/fifo_core/ds/list.py
Estructura de Datos Persistente: Lista Enlazada (Cons List).
Segmento base de la cola amortizada. Celdas inmutables con compartición estructural.
"""
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from ..invariants import REPR_LIMIT

T = TypeVar('T')
U = TypeVar('U')


class ConsList(Generic[T]):
    """
    Lista Inmutable Persistente.
    Cada celda guarda (head, tail). La lista vacía es un único centinela NIL.
    Soporta operaciones funcionales (Map, Filter, Fold) sin recursión.
    """
    __slots__ = ('_head', '_tail')

    def __init__(self, head: Any, tail: Optional['ConsList[T]']):
        self._head = head
        self._tail = tail

    @staticmethod
    def nil() -> 'ConsList':
        return _NIL

    @staticmethod
    def cons(head: T, tail: 'ConsList[T]') -> 'ConsList[T]':
        """O(1) Prepend. La cola se comparte, nunca se copia."""
        # Validación defensiva: tail debe ser una lista
        if not isinstance(tail, ConsList):
            raise TypeError(f"Tail must be ConsList, got {type(tail)}")
        return ConsList(head, tail)

    @staticmethod
    def from_python(items: Iterable[T]) -> 'ConsList[T]':
        """O(N). Construye desde cualquier iterable finito, conservando el orden."""
        if not isinstance(items, (list, tuple)):
            items = list(items)
        acc = _NIL
        # Iteración inversa para construir O(N) sin recursión
        for item in reversed(items):
            acc = ConsList(item, acc)
        return acc

    @staticmethod
    def from_reversed(items: Iterable[T]) -> 'ConsList[T]':
        """O(N). El último elemento del iterable queda en la cabeza."""
        acc = _NIL
        for item in items:
            acc = ConsList(item, acc)
        return acc

    @property
    def is_empty(self) -> bool:
        return self is _NIL

    @property
    def head(self) -> T:
        if self is _NIL: raise IndexError("Head of empty list")
        return self._head

    @property
    def tail(self) -> 'ConsList[T]':
        if self is _NIL: raise IndexError("Tail of empty list")
        return self._tail

    # --- FUNCTIONAL API (High Order Functions) ---

    def reverse(self) -> 'ConsList[T]':
        """O(N). Nueva lista en orden inverso (el 'volcado' de la cola)."""
        return ConsList.from_reversed(self)

    def map(self, fn: Callable[[T], U]) -> 'ConsList[U]':
        """
        Aplica fn(item) a cada elemento y retorna una NUEVA lista persistente.
        Implementación ITERATIVA para evitar Stack Overflow en listas grandes.
        """
        if self is _NIL: return self
        return ConsList.from_python([fn(item) for item in self])

    def filter(self, predicate: Callable[[T], bool]) -> 'ConsList[T]':
        """Retorna nueva lista solo con elementos que cumplan predicate(item)."""
        if self is _NIL: return self
        return ConsList.from_python([item for item in self if predicate(item)])

    def fold(self, fn: Callable[[Any, T], Any], initial: Any) -> Any:
        """Reduce la lista a un valor acumulado (Left Fold)."""
        acc = initial
        curr = self
        while curr is not _NIL:
            acc = fn(acc, curr._head)
            curr = curr._tail
        return acc

    def last(self) -> T:
        """O(N). Último elemento de la lista."""
        if self is _NIL: raise IndexError("Last of empty list")
        curr = self
        while curr._tail is not _NIL:
            curr = curr._tail
        return curr._head

    # --- PYTHON MAGIC METHODS ---

    def __iter__(self) -> Iterator[T]:
        """Iterador seguro O(N)."""
        curr = self
        while curr is not _NIL:
            yield curr._head
            curr = curr._tail

    def __len__(self) -> int:
        """O(N) Iterativo. Safe for 1M+ items."""
        count = 0
        curr = self
        while curr is not _NIL:
            count += 1
            curr = curr._tail
        return count

    def __bool__(self) -> bool:
        return self is not _NIL

    def __repr__(self):
        """Impresión segura. Trunca si es muy larga."""
        if self is _NIL: return "Nil"

        items = []
        count = 0
        curr = self
        while curr is not _NIL and count < REPR_LIMIT:
            items.append(repr(curr._head))
            curr = curr._tail
            count += 1

        if curr is not _NIL:
            items.append("...")

        return f"List[{', '.join(items)}]"

    def __eq__(self, other):
        """
        Igualdad estructural elemento a elemento.
        Atajo O(1) cuando ambas listas comparten la misma celda.
        """
        if not isinstance(other, ConsList): return NotImplemented
        a, b = self, other
        while a is not b:
            if a is _NIL or b is _NIL: return False
            if a._head != b._head: return False
            a, b = a._tail, b._tail
        return True

    __hash__ = None


# Centinela único de lista vacía. Su tail es None, nunca se recorre.
_NIL: ConsList = ConsList(None, None)
