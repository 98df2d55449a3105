"""
Polars integration for stringmetrics.

Levels:
    1. **Expression Namespace** (`.strsim`) - Per-row operations
       Example: `df.with_columns(score=pl.col("name").strsim.similarity("John"))`

    2. **Series Functions** - Aligned scoring and ranking
       Example: `rank_series(df["typo"], ["color", "size"], min_score=0.5)`

Examples:
    >>> import polars as pl
    >>> import stringmetrics.polars as smp  # or: from stringmetrics import polars as smp

    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(dist=pl.col("name").strsim.distance("John", metric="osa"))

    >>> smp.similarity_series(df["name"], pl.Series(["Jon"] * 3), "jaro")
"""

# Expression namespace is registered on import
# (importing stringmetrics.expr handles this)
import stringmetrics.expr as _expr  # noqa: F401
from stringmetrics.polars_ext import (
    distance_series,
    rank_series,
    similarity_series,
)

__all__ = [
    "similarity_series",
    "distance_series",
    "rank_series",
]
