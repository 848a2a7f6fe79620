"""cachematrix warning categories.

These exist so users can filter/suppress cachematrix diagnostics without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class CacheMatrixWarning(UserWarning):
    """Base warning category for all cachematrix user-facing warnings."""


class CachedInverseNotice(CacheMatrixWarning):
    """Informational notice that an inverse was served from the cache."""
