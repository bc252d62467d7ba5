"""
Domain models and value objects.

Contains plain-data snapshots of exact numbers (BigIntSnapshot, RationalSnapshot).
"""

from src.core.domain.snapshots import BigIntSnapshot, RationalSnapshot

__all__ = [
    "BigIntSnapshot",
    "RationalSnapshot",
]
