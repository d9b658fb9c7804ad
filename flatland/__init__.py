# ==============================================
# Flatland — Typed Columnar CSV Cache
# ==============================================
#
# Package Structure:
#
# flatland/
# ├── inference/        # Field types + per-cell type probe
# ├── cache/            # DataSetCache: CSV import, errors, observers
# ├── config.py         # Configuration management
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
