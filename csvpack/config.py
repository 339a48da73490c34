"""
Global configuration settings for csvpack.

This module centralizes configuration for:

    - the private work directory (export staging, archives, import sandboxes)
    - archive and per-type file naming
    - feature flags (logging, etc.)

It provides:
    CsvPackConfig  – structured config object
    load_config()  – load from environment variables or defaults
"""

from __future__ import annotations

from dataclasses import dataclass
import os


DEFAULT_WORK_DIR = "./csvpack_files"
DEFAULT_ARCHIVE_PREFIX = "csv_bundle_"
DEFAULT_DATE_SEPARATOR = "_"
DEFAULT_TIMESTAMP_FORMAT = "%Y_%m_%d_%H_%M"
DEFAULT_FILE_SUFFIX = ".csv"


@dataclass
class CsvPackConfig:
    """
    Canonical configuration for csvpack.

    Attributes
    ----------
    work_dir:
        Application-private directory. Exports stage their CSV files and
        write archives here; imports create per-call sandboxes below it.

    archive_prefix:
        Fixed prefix of every exported archive name. The import launcher
        only accepts archives whose display name starts with it.

    date_separator:
        Separator placed between year, month and day in archive names.

    timestamp_format:
        strftime pattern appended to each record type's base name.

    file_suffix:
        Extension appended to each per-type CSV file name.

    enable_logging:
        Whether to configure INFO level logging on façade construction.
    """

    work_dir: str = DEFAULT_WORK_DIR

    archive_prefix: str = DEFAULT_ARCHIVE_PREFIX
    date_separator: str = DEFAULT_DATE_SEPARATOR
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    file_suffix: str = DEFAULT_FILE_SUFFIX

    enable_logging: bool = False


def load_config() -> CsvPackConfig:
    """
    Load CsvPackConfig from environment variables, falling back to defaults.

    Recognized variables:
        CSVPACK_WORK_DIR          (directory path)
        CSVPACK_ARCHIVE_PREFIX    (string)
        CSVPACK_DATE_SEPARATOR    (string)
        CSVPACK_TIMESTAMP_FORMAT  (strftime pattern)
        CSVPACK_FILE_SUFFIX       (string, may be empty)
        CSVPACK_ENABLE_LOGGING    ("true" / "false" / "1" / "0")

    Returns
    -------
    CsvPackConfig
    """

    def _env_flag(name: str, default: bool) -> bool:
        val = os.getenv(name)
        if val is None:
            return default
        return val.strip().lower() in ("1", "true", "yes", "on")

    return CsvPackConfig(
        work_dir=os.getenv("CSVPACK_WORK_DIR", DEFAULT_WORK_DIR),

        archive_prefix=os.getenv(
            "CSVPACK_ARCHIVE_PREFIX",
            DEFAULT_ARCHIVE_PREFIX
        ),
        date_separator=os.getenv(
            "CSVPACK_DATE_SEPARATOR",
            DEFAULT_DATE_SEPARATOR
        ),
        timestamp_format=os.getenv(
            "CSVPACK_TIMESTAMP_FORMAT",
            DEFAULT_TIMESTAMP_FORMAT
        ),
        file_suffix=os.getenv("CSVPACK_FILE_SUFFIX", DEFAULT_FILE_SUFFIX),

        enable_logging=_env_flag(
            "CSVPACK_ENABLE_LOGGING",
            default=False
        ),
    )
