import typing
from ..types import *
from ..cardinality import choose, permute, multichoose

if typing.TYPE_CHECKING:
    from ..source import Source
    from .combinations import Combinations
    from .combinations_with_replacement import CombinationsWithReplacement
    from .permutations import Permutations


class CombinatoricsAccessor(Generic[T]):
    """generators and counts over a source sequence, reached as `source.comb`"""

    def __init__(self, source_instance: 'Source[T]'):
        self._source = source_instance

    def combinations(self, k: int) -> 'Combinations[T]':
        from .combinations import Combinations
        return Combinations(self._source.data, k)

    def combinations_with_replacement(self, k: int) -> 'CombinationsWithReplacement[T]':
        """elements are treated as if they were replaced after each pick."""
        from .combinations_with_replacement import CombinationsWithReplacement
        return CombinationsWithReplacement(self._source.data, k)

    def permutations(self, k: Optional[int] = None) -> 'Permutations[T]':
        """k defaults to the full length of the source."""
        from .permutations import Permutations
        return Permutations(self._source.data, k)

    def binomial_coefficient(self, k: int) -> int:
        """n choose k, 0 outside the valid domain"""
        return choose(len(self._source), k)

    def permutation_count(self, k: Optional[int] = None) -> int:
        n = len(self._source)
        return permute(n, n if k is None else k)

    def multiset_count(self, k: int) -> int:
        return multichoose(len(self._source), k)
