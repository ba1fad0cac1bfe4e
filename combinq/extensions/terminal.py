from __future__ import annotations
import numpy as np
import pandas as pd
from collections import Counter
from ..types import *


class TerminalAccessor:
    """
    draining conversions for a generator, reached as `gen.to`.
    every method advances the generator to exhaustion (or until it has what it needs),
    starting from the generator's current position.
    """

    def __init__(self, generator: CombinationLike):
        self._generator = generator

    def _drain(self) -> Iterator[IndexTuple]:
        gen = self._generator
        while gen.advance():
            yield gen.indices.copy()

    def list(self) -> List[IndexTuple]:
        """remaining index tuples as a list"""
        return list(self._drain())

    def items(self, source: Optional[Sequence[Any]] = None) -> List[Tuple[Any, ...]]:
        """remaining tuples projected onto source (or the bound sequence)"""
        gen = self._generator
        result = []
        while gen.advance():
            result.append(gen.items(source).copy())
        return result

    def array(self) -> np.ndarray:
        """remaining index tuples as an int array of shape (count, k)"""
        k = self._generator.arity
        rows = self.list()
        if not rows:
            return np.empty((0, k), dtype=np.int64)
        return np.array(rows, dtype=np.int64)

    def df(self, columns: Optional[List[str]] = None) -> pd.DataFrame:
        """remaining index tuples as a dataframe, one column per tuple position"""
        k = self._generator.arity
        cols = columns if columns is not None else [f"p{i}" for i in range(k)]
        if len(cols) != k:
            raise ValueError(f"expected {k} column names, got {len(cols)}")
        return pd.DataFrame(self.array(), columns=cols)

    def count(self) -> int:
        """number of tuples left"""
        return sum(1 for _ in self._drain())

    def value_counts(self) -> Dict[int, int]:
        """how often each index value occurs across the remaining tuples"""
        counts = Counter()
        gen = self._generator
        while gen.advance():
            counts.update(gen.indices)
        return dict(counts)

    def first(self) -> IndexTuple:
        """the next tuple"""
        if not self._generator.advance():
            raise ValueError("sequence contains no elements")
        return self._generator.indices.copy()
