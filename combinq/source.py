from .types import *
from .extensions.combinatorics import CombinatoricsAccessor


class Source(Generic[T]):
    """
    a caller-owned sequence wrapped by reference.
    nothing is copied, so mutating the underlying sequence between advances
    changes the items a generator projects.
    """

    def __init__(self, data: Sequence[T]):
        self.data = data
        self.comb = CombinatoricsAccessor(self)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __repr__(self) -> str:
        return f"Source(n={len(self.data)})"
