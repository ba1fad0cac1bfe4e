import logging

from ..types import *
from ..cardinality import permute
from ..errors import ConstructionError
from ..projection import fill_buffer, resolve_domain, select_source
from .terminal import TerminalAccessor

logger = logging.getLogger(__name__)


class Permutations(Generic[T]):
    """
    k-permutations of n positions: ordered tuples of k distinct indices in lexicographic order.

    the successor is the classic rotate-and-swap scheme (the one behind
    itertools.permutations). it works on a full working array of n positions plus
    a countdown per output position; the exposed tuple is the first k slots of
    the working array. each advance costs amortized O(1) swaps, with an O(n)
    rotation whenever a countdown wraps.
    """

    def __init__(self, domain: Domain, k: Optional[int] = None):
        n, data = resolve_domain(domain)
        k = n if k is None else k
        if n <= 0:
            raise ConstructionError("n must be greater than 0", n, k)
        elif k <= 0:
            raise ConstructionError("k must be greater than 0", n, k)
        elif k > n:
            raise ConstructionError("k must be less than or equal to n", n, k)

        self.n = n
        self.k = k
        self.length = permute(n, k)
        self.state = GeneratorState.NOT_STARTED
        self._data = data
        self._pool: List[int] = list(range(n))
        self._cycles: List[int] = list(range(n, n - k, -1))
        self._buffer: List[Any] = [None] * k
        self._emitted = 0
        self.to = TerminalAccessor(self)
        logger.debug("permutations n=%d k=%d length=%d", n, k, self.length)

    def advance(self) -> bool:
        if self.state is GeneratorState.EXHAUSTED:
            return False

        pool, cycles, n = self._pool, self._cycles, self.n
        if self.state is GeneratorState.NOT_STARTED:
            for i in range(n):
                pool[i] = i
            self.state = GeneratorState.ACTIVE
            self._emitted = 1
            return True

        # every countdown at 1 means the current tuple is the last one.
        # stop here so the final tuple stays in place
        if cycles[-1] == 1 and all(c == 1 for c in cycles):
            self.state = GeneratorState.EXHAUSTED
            logger.debug("permutations n=%d k=%d exhausted after %d tuples", n, self.k, self._emitted)
            return False

        for i in reversed(range(self.k)):
            cycles[i] -= 1
            if cycles[i] == 0:
                # position i has cycled through every candidate: park its value at the end
                pool.append(pool.pop(i))
                cycles[i] = n - i
            else:
                j = n - cycles[i]
                pool[i], pool[j] = pool[j], pool[i]
                self._emitted += 1
                return True

        # unreachable: some countdown above 1 always stops the loop with a swap
        raise RuntimeError("permutation countdowns out of sync")

    @property
    def indices(self) -> SequenceView[int]:
        return SequenceView(self._pool, self.k)

    @property
    def arity(self) -> int:
        return self.k

    def total_count(self) -> int:
        return self.length

    def items(self, source: Optional[Sequence[T]] = None) -> SequenceView[T]:
        data = select_source(self._data, source, self.n)
        return SequenceView(fill_buffer(self._buffer, data, self.indices))

    def snapshot(self) -> IndexTuple:
        return tuple(self._pool[:self.k])

    def item_snapshot(self, source: Optional[Sequence[T]] = None) -> Tuple[T, ...]:
        return self.items(source).copy()

    def __iter__(self) -> Iterator[IndexTuple]:
        while self.advance():
            yield tuple(self._pool[:self.k])

    def __repr__(self) -> str:
        return f"Permutations(n={self.n}, k={self.k}, length={self.length}, state={self.state.value})"
