# ==============================================
# Import Errors
# ==============================================
#
# All failures of DataSetCache.import_csv() derive from
# CacheImportError and carry the resource URI and the
# underlying cause (also chained via `raise ... from`).
#
# - OpenError                 → resource could not be opened; cache untouched
# - UnexpectedEndOfInputError → no header row; cache left empty
# - ParseError                → a row failed to parse; earlier rows stay cached
# - CacheSealedError          → the cache was already imported into
#
# ==============================================

from typing import Optional


class CacheImportError(Exception):
    """Base class for errors raised while importing into a DataSetCache."""

    def __init__(self, message: str, uri: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.uri = uri
        self.cause = cause


class OpenError(CacheImportError):
    def __init__(self, uri: str, cause: BaseException):
        super().__init__(f"could not open file {uri}: {cause}", uri, cause)


class UnexpectedEndOfInputError(CacheImportError):
    def __init__(self, uri: str):
        super().__init__(
            f"unexpected end of file while reading CSV file header from {uri}", uri
        )


class ParseError(CacheImportError):
    """A record could not be read as CSV. `line` is the reader's line number."""

    def __init__(self, uri: str, cause: BaseException, line: int = 0):
        super().__init__(f"could not parse CSV file {uri} (line {line}): {cause}", uri, cause)
        self.line = line


class CacheSealedError(CacheImportError):
    def __init__(self, uri: str):
        super().__init__(f"cache already populated; refusing to import {uri}", uri)
