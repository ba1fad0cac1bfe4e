from typing import Optional


class ConstructionError(ValueError):
    """raised when (n, k) fall outside the domain a generator family accepts."""

    def __init__(self, reason: str, n: Optional[int] = None, k: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.n = n
        self.k = k


class ContractViolationError(ValueError):
    """a caller bug in the projection step, e.g. buffer and indices of different lengths."""
    pass
