import numbers

from .types import *
from .errors import ContractViolationError


def fill_buffer(buffer: List[T], data: Sequence[T], indices: Sequence[int]) -> List[T]:
    """overwrite buffer[j] with data[indices[j]] for every position j"""
    if len(buffer) != len(indices):
        raise ContractViolationError("length of buffer and indices did not match")
    for buffer_idx, data_idx in enumerate(indices):
        buffer[buffer_idx] = data[data_idx]
    return buffer


def resolve_domain(domain: Domain) -> Tuple[int, Optional[Sequence[Any]]]:
    """
    split a constructor argument into (n, bound data).
    an int is a bare domain size; a sequence is held by reference and its length is n.
    """
    # bool is an int subclass but never a sensible domain size
    if isinstance(domain, bool):
        raise TypeError("domain must be an int or a sequence, not bool")
    # numpy integer scalars register as Integral too
    if isinstance(domain, numbers.Integral):
        return int(domain), None
    # numpy arrays and pandas series qualify alongside lists, tuples and strings
    if hasattr(domain, '__getitem__') and hasattr(domain, '__len__'):
        return len(domain), domain
    raise TypeError(f"domain must be an int or a sequence, got {type(domain).__name__}")


def select_source(bound: Optional[Sequence[T]], source: Optional[Sequence[T]], n: int) -> Sequence[T]:
    """pick the sequence a projection reads from and check it covers the domain"""
    data = bound if source is None else source
    if data is None:
        raise ContractViolationError("no source sequence given and none bound at construction")
    if len(data) != n:
        raise ContractViolationError(f"source has {len(data)} elements, generator domain is {n}")
    return data
