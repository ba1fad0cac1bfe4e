from enum import Enum
from collections.abc import Sequence as _SequenceABC
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Sequence, Protocol, runtime_checkable
)

T = TypeVar('T')
U = TypeVar('U')

IndexTuple = Tuple[int, ...]
Domain = Union[int, Sequence[Any]]


class GeneratorState(Enum):
    """lifecycle of an index generator. exhausted is terminal."""
    NOT_STARTED = 'not_started'
    ACTIVE = 'active'
    EXHAUSTED = 'exhausted'


class SequenceView(_SequenceABC, Generic[T]):
    """
    read-only window over the first `length` entries of a list.
    the view aliases the list, so it changes whenever the owner mutates it.
    call copy() to keep a value past the next advance.
    """

    __slots__ = ('_data', '_length')

    def __init__(self, data: List[T], length: Optional[int] = None):
        self._data = data
        self._length = len(data) if length is None else length

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._data[:self._length][index])
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("view index out of range")
        return self._data[index]

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        data = self._data
        for i in range(self._length):
            yield data[i]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (SequenceView, list, tuple)):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    def copy(self) -> Tuple[T, ...]:
        """owned snapshot of the current contents"""
        return tuple(self._data[:self._length])

    def __repr__(self) -> str:
        return f"SequenceView({list(self)})"


@runtime_checkable
class CombinationLike(Protocol):
    """
    capability shared by every index generator.
    the three generators satisfy it independently; there is no common base class.
    """

    @property
    def indices(self) -> SequenceView[int]: ...

    @property
    def arity(self) -> int: ...

    def advance(self) -> bool: ...

    def items(self, source: Optional[Sequence[Any]] = None) -> SequenceView[Any]: ...

    def total_count(self) -> int: ...
