# ==============================================
# CACHE
# ==============================================
#
# This package holds the in-memory dataset and the single
# import pass that fills it from a CSV file.
#
# Modules:
# --------
# - dataset_cache.py  → DataSetCache: field names, field types, raw rows
# - observer.py       → Import progress callbacks (logging by default)
# - errors.py         → Exceptions raised by import_csv()
#
# ==============================================

from .dataset_cache import DataSetCache
from .errors import (
    CacheImportError,
    CacheSealedError,
    OpenError,
    ParseError,
    UnexpectedEndOfInputError,
)
from .observer import ImportObserver, LoggingObserver

__all__ = [
    "DataSetCache",
    "CacheImportError",
    "CacheSealedError",
    "OpenError",
    "ParseError",
    "UnexpectedEndOfInputError",
    "ImportObserver",
    "LoggingObserver",
]
