"""
Error types for seller sales metrics.
"""

from __future__ import annotations


class InvalidInputError(ValueError):
    """
    Raised before any processing when the input collections or the options
    are malformed. No partial results are produced once this fires.
    """


__all__ = ["InvalidInputError"]
