import logging

from ..types import *
from ..cardinality import multichoose
from ..errors import ConstructionError
from ..projection import fill_buffer, resolve_domain, select_source
from .terminal import TerminalAccessor

logger = logging.getLogger(__name__)


class CombinationsWithReplacement(Generic[T]):
    """
    k-combinations with repetition: non-decreasing index tuples in lexicographic order.
    k may exceed n since a position can be picked more than once.
    """

    def __init__(self, domain: Domain, k: int):
        n, data = resolve_domain(domain)
        if n <= 0:
            raise ConstructionError("n must be greater than 0", n, k)
        elif k <= 0:
            raise ConstructionError("k must be greater than 0", n, k)

        self.n = n
        self.k = k
        self.length = multichoose(n, k)
        self.state = GeneratorState.NOT_STARTED
        self._data = data
        self._inds: List[int] = [0] * k
        self._buffer: List[Any] = [None] * k
        self._emitted = 0
        self.to = TerminalAccessor(self)
        logger.debug("combinations with replacement n=%d k=%d length=%d", n, k, self.length)

    def advance(self) -> bool:
        if self.state is GeneratorState.EXHAUSTED:
            return False

        inds, top = self._inds, self.n - 1
        if self.state is GeneratorState.NOT_STARTED:
            for i in range(self.k):
                inds[i] = 0
            self.state = GeneratorState.ACTIVE
            self._emitted = 1
            return True

        for i in reversed(range(self.k)):
            if inds[i] < top:
                break
        else:
            self.state = GeneratorState.EXHAUSTED
            logger.debug("combinations with replacement n=%d k=%d exhausted after %d tuples",
                         self.n, self.k, self._emitted)
            return False

        # the tail becomes a constant run, unlike the increasing run of plain combinations
        value = inds[i] + 1
        for j in range(i, self.k):
            inds[j] = value
        self._emitted += 1
        return True

    @property
    def indices(self) -> SequenceView[int]:
        return SequenceView(self._inds)

    @property
    def arity(self) -> int:
        return self.k

    def total_count(self) -> int:
        return self.length

    def items(self, source: Optional[Sequence[T]] = None) -> SequenceView[T]:
        data = select_source(self._data, source, self.n)
        return SequenceView(fill_buffer(self._buffer, data, self._inds))

    def snapshot(self) -> IndexTuple:
        return tuple(self._inds)

    def item_snapshot(self, source: Optional[Sequence[T]] = None) -> Tuple[T, ...]:
        return self.items(source).copy()

    def __iter__(self) -> Iterator[IndexTuple]:
        while self.advance():
            yield tuple(self._inds)

    def __repr__(self) -> str:
        return (f"CombinationsWithReplacement(n={self.n}, k={self.k}, "
                f"length={self.length}, state={self.state.value})")
