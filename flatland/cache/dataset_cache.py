# ==============================================
# DataSetCache — Typed Columnar Importer
# ==============================================
#
# PURPOSE:
#   Hold a whole CSV dataset in memory and work out, per column,
#   the most specific scalar type every value in it fits.
#
# HOW IMPORT WORKS:
#
#   open file ──► read header ──► seed every field as INTEGER
#                                        │
#                 ┌──────────────────────┘
#                 ▼
#   for each data row:
#       for each column:
#           field_types[i] = field_types[i].widen(TypeProbe.probe(cell))
#       rows.append(row)            (raw strings, never converted)
#                 │
#                 ▼
#   report row count + one line per field to the observer
#
# CLASS: DataSetCache
# -------------------
#
#   Constructor:
#   ------------
#   - __init__(config: AppConfig | None = None,
#              observer: ImportObserver | None = None,
#              seed_type: FieldType | None = None)
#       All arguments optional; DataSetCache() gives an empty cache.
#
#   Attributes:
#   -----------
#   - field_names: list[str]         header, file order
#   - field_types: list[FieldType]   index-aligned with field_names
#   - rows: list[list[str]]          raw cell text, one list per data row
#
#   Public Methods:
#   ---------------
#   - import_csv(uri: str) -> None
#       The one and only way to fill the cache. Raises a
#       CacheImportError subclass on failure. Rows parsed before
#       a ParseError stay in the cache; there is no rollback.
#
#   - row_count -> int
#   - get_field_summary() -> list[tuple[str, str]]
#
#   The whole dataset lives in memory; there is no eviction
#   and nothing is streamed back to disk.
#
# ==============================================

import csv
from typing import Iterator, List, Optional, Tuple

from flatland.config import AppConfig, get_config
from flatland.inference import SEED_TYPES, FieldType, TypeProbe
from .errors import (
    CacheSealedError,
    OpenError,
    ParseError,
    UnexpectedEndOfInputError,
)
from .observer import ImportObserver, LoggingObserver


class DataSetCache:
    """
    In-memory tabular dataset with one inferred type per field.

    Populated exactly once by import_csv(); safe to read from
    any number of readers afterwards since nothing writes to it again.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        observer: Optional[ImportObserver] = None,
        seed_type: Optional[FieldType] = None,
    ):
        """
        Create an empty cache.

        Args:
            config: Application configuration. If None, loads from environment.
            observer: Receives import progress events. Defaults to LoggingObserver.
            seed_type: Type every field starts from before the first data row.
                       Defaults to config.cache.seed_type ("integer").
        """
        self._config = config or get_config()
        self._observer = observer or LoggingObserver()
        self._seed_type = seed_type or FieldType(self._config.cache.seed_type)
        if self._seed_type not in SEED_TYPES:
            raise ValueError(
                f"seed type must be one of {[t.value for t in SEED_TYPES]}, "
                f"got {self._seed_type.value!r}"
            )

        self.field_names: List[str] = []
        self.field_types: List[FieldType] = []
        self.rows: List[List[str]] = []

        # Set once an import has opened its resource
        self._sealed = False

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def get_field_summary(self) -> List[Tuple[str, str]]:
        """
        Pair each field name with its type tag, in header order.

        A list rather than a dict so repeated header names keep one
        entry per column.

        Returns:
            e.g. [("id", "FIELD_TYPE_INTEGER"), ("name", "FIELD_TYPE_STRING")]
        """
        return [
            (name, field_type.tag)
            for name, field_type in zip(self.field_names, self.field_types)
        ]

    def import_csv(self, uri: str) -> None:
        """
        Read a CSV file into the cache, inferring a type for every field.

        Args:
            uri: Path of the CSV file. The first row is the header.

        Raises:
            OpenError: The file could not be opened.
            UnexpectedEndOfInputError: The file has no rows at all.
            ParseError: A row is malformed or has the wrong number of fields.
            CacheSealedError: This cache was already imported into.
        """
        if self._sealed:
            raise CacheSealedError(uri)

        self._observer.import_started(uri)

        try:
            handle = open(uri, "r", newline="", encoding=self._config.csv.encoding)
        except (OSError, LookupError) as e:
            # LookupError: unknown encoding name
            raise OpenError(uri, e) from e

        try:
            reader = csv.reader(
                handle,
                delimiter=self._config.csv.delimiter,
                strict=True,
            )
        except (TypeError, csv.Error) as e:
            handle.close()
            raise ParseError(uri, e) from e

        self._sealed = True

        with handle:
            records = self._read_records(reader, uri)

            header = next(records, None)
            if header is None:
                raise UnexpectedEndOfInputError(uri)

            self.field_names = header
            self.field_types = [self._seed_type] * len(header)

            for record in records:
                if len(record) != len(self.field_names):
                    raise ParseError(
                        uri,
                        ValueError(
                            f"wrong number of fields: expected {len(self.field_names)}, "
                            f"got {len(record)}"
                        ),
                        reader.line_num,
                    )
                self._observe_row(record)
                self.rows.append(record)

        self._observer.import_completed(len(self.rows))
        for name, field_type in zip(self.field_names, self.field_types):
            self._observer.field_typed(name, field_type)

    def _read_records(self, reader, uri: str) -> Iterator[List[str]]:
        """
        Yield non-empty records from a csv reader.

        Blank lines are skipped. Lexical errors and undecodable
        bytes surface as ParseError with the reader's line number.
        """
        while True:
            try:
                record = next(reader)
            except StopIteration:
                return
            except (csv.Error, UnicodeDecodeError) as e:
                raise ParseError(uri, e, reader.line_num) from e

            if record:
                yield record

    def _observe_row(self, record: List[str]) -> None:
        """Widen each field's type with the probed type of its cell."""
        for column, value in enumerate(record):
            current = self.field_types[column]
            if current.is_terminal:
                continue
            self.field_types[column] = current.widen(TypeProbe.probe(value))
