# ==============================================
# Import Observers
# ==============================================
#
# PURPOSE:
#   Receive progress events from DataSetCache.import_csv() so the
#   cache never writes to the console itself.
#
# EVENTS (in order):
# ------------------
#   1. import_started(uri)                → before the file is opened
#   2. import_completed(row_count)        → only after a successful import
#   3. field_typed(name, field_type)      → once per field, header order
#
# CLASSES:
# --------
# - ImportObserver   → Base class; every event is a no-op
# - LoggingObserver  → Writes the events through the `logging` module
#
# ==============================================

import logging
from typing import Optional

from flatland.inference import FieldType


class ImportObserver:
    """Receives import progress events. Subclass and override what you need."""

    def import_started(self, uri: str) -> None:
        pass

    def import_completed(self, row_count: int) -> None:
        pass

    def field_typed(self, name: str, field_type: FieldType) -> None:
        pass


class LoggingObserver(ImportObserver):
    """
    Default observer. Reports the import as human readable log lines:
    
        importing data/sales.csv
        finished processing CSV, 5000000 rows processed
        fields:
           Region: FIELD_TYPE_STRING
           Units Sold: FIELD_TYPE_INTEGER
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("flatland.cache")
        self._fields_header_written = False

    def import_started(self, uri: str) -> None:
        self._fields_header_written = False
        self.logger.info("importing %s", uri)

    def import_completed(self, row_count: int) -> None:
        self.logger.info("finished processing CSV, %d rows processed", row_count)

    def field_typed(self, name: str, field_type: FieldType) -> None:
        if not self._fields_header_written:
            self.logger.info("fields:")
            self._fields_header_written = True
        self.logger.info("   %s: %s", name, field_type.tag)
