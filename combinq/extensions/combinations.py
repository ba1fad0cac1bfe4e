import logging

from ..types import *
from ..cardinality import choose
from ..errors import ConstructionError
from ..projection import fill_buffer, resolve_domain, select_source
from .terminal import TerminalAccessor

logger = logging.getLogger(__name__)


class Combinations(Generic[T]):
    """
    k-combinations of n positions as strictly increasing index tuples,
    produced one at a time in lexicographic order.

    construct with a domain size or with a sequence (held by reference, its
    length is n), then call advance() until it returns false:

        c = Combinations(['apple', 'banana', 'cherry'], 2)
        while c.advance():
            print(c.indices, c.items())

    indices and items() are views over buffers reused on every advance.
    use snapshot() / item_snapshot() to keep a result.
    """

    def __init__(self, domain: Domain, k: int):
        n, data = resolve_domain(domain)
        if n <= 0:
            raise ConstructionError("n must be greater than 0", n, k)
        elif k <= 0:
            raise ConstructionError("k must be greater than 0", n, k)
        elif k > n:
            raise ConstructionError("k must be less than or equal to n", n, k)

        self.n = n
        self.k = k
        self.length = choose(n, k)
        self.state = GeneratorState.NOT_STARTED
        self._data = data
        self._inds: List[int] = [0] * k
        self._buffer: List[Any] = [None] * k
        self._emitted = 0
        self.to = TerminalAccessor(self)
        logger.debug("combinations n=%d k=%d length=%d", n, k, self.length)

    def advance(self) -> bool:
        """move to the next tuple. returns false once every tuple has been produced."""
        if self.state is GeneratorState.EXHAUSTED:
            return False

        inds, n, k = self._inds, self.n, self.k
        if self.state is GeneratorState.NOT_STARTED:
            for i in range(k):
                inds[i] = i
            self.state = GeneratorState.ACTIVE
            self._emitted = 1
            return True

        # rightmost position that has not reached its ceiling
        for i in reversed(range(k)):
            if inds[i] < i + n - k:
                break
        else:
            self.state = GeneratorState.EXHAUSTED
            logger.debug("combinations n=%d k=%d exhausted after %d tuples", n, k, self._emitted)
            return False

        inds[i] += 1
        for j in range(i + 1, k):
            inds[j] = inds[j - 1] + 1
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
        return f"Combinations(n={self.n}, k={self.k}, length={self.length}, state={self.state.value})"
