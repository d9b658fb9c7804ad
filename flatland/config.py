# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file.
#   Provides typed config objects to the cache and the CLI.
#
# CLASSES:
# --------
# - CSVConfig (dataclass)
#     delimiter: str     (default ",")
#     encoding: str      (default "utf-8")
#
# - CacheConfig (dataclass)
#     seed_type: str     (default "integer")
#         Type every field starts from before the first data row.
#         "unknown" selects the alternative seeding; any other
#         value raises ValueError.
#
# - AppConfig (dataclass)
#     csv: CSVConfig
#     cache: CacheConfig
#     data_file: str     (default "data/5m_sales_records.csv")
#     log_level: str     (default "INFO")
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# USAGE:
# ------
#   from flatland.config import get_config
#   config = get_config()
#   print(config.csv.delimiter)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

from flatland.inference import SEED_TYPES


@dataclass
class CSVConfig:
    """CSV reader configuration."""
    delimiter: str = ","
    encoding: str = "utf-8"


@dataclass
class CacheConfig:
    """Type inference configuration for the cache."""
    seed_type: str = "integer"

    def __post_init__(self):
        allowed = [t.value for t in SEED_TYPES]
        if self.seed_type not in allowed:
            raise ValueError(
                f"CACHE_SEED_TYPE must be one of {allowed}, got {self.seed_type!r}"
            )


@dataclass
class AppConfig:
    """Main application configuration."""
    csv: CSVConfig = field(default_factory=CSVConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    data_file: str = "data/5m_sales_records.csv"
    log_level: str = "INFO"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.
    
    Returns:
        AppConfig: Application configuration
    """
    global _config_instance
    
    if _config_instance is not None:
        return _config_instance
    
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)
    
    csv_config = CSVConfig(
        delimiter=os.getenv("CSV_DELIMITER", ","),
        encoding=os.getenv("CSV_ENCODING", "utf-8")
    )
    
    cache_config = CacheConfig(
        seed_type=os.getenv("CACHE_SEED_TYPE", "integer").lower()
    )
    
    _config_instance = AppConfig(
        csv=csv_config,
        cache=cache_config,
        data_file=os.getenv("DATA_FILE", "data/5m_sales_records.csv"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper()
    )
    
    return _config_instance
