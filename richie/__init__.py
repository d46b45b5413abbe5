"""In-memory epoch-based token staking with lock-period multipliers and reward settlement."""

__version__ = "0.1.0"

__all__ = ["constants", "errors", "state", "program"]