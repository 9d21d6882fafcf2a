"""Shared constants for refstore runtime defaults and limits.

This module is the single source of truth for default values that are consumed
across configuration loading, region parsing, and FASTA loading.
"""

from __future__ import annotations

# Region query defaults
DEFAULT_MAX_QUERY_SIZE = 1_000_000  # 1 Mbp
DEFAULT_UPPERCASE = True

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# FASTA index suffix written next to a loaded file
FASTA_INDEX_SUFFIX = ".fai"
