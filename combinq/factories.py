from .types import *
from .source import Source
from .extensions.combinations import Combinations
from .extensions.combinations_with_replacement import CombinationsWithReplacement
from .extensions.permutations import Permutations


def from_sequence(data: Sequence[T]) -> Source[T]:
    """wrap a sequence so generators can be built from it with .comb"""
    return Source(data)


def combinations(domain: Domain, k: int) -> Combinations:
    """k-combinations over a domain size or a sequence"""
    return Combinations(domain, k)


def combinations_with_replacement(domain: Domain, k: int) -> CombinationsWithReplacement:
    """k-combinations with repetition over a domain size or a sequence"""
    return CombinationsWithReplacement(domain, k)


def permutations(domain: Domain, k: Optional[int] = None) -> Permutations:
    """k-permutations over a domain size or a sequence; k defaults to n"""
    return Permutations(domain, k)


# --- aliases ---
C = from_sequence
cwr = combinations_with_replacement
