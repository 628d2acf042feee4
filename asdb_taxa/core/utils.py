"""Utility functions for asdb-taxa."""

import re
import logging

from asdb_taxa.models.errors import TaxIdParseError

# Logger configuration
logger = logging.getLogger(__name__)

# Static global variables
UNKNOWN = "Unknown"
DUMP_SEPARATOR = "|"
TAXON_PATTERN = r'"taxon:(\d+)'
CORPUS_SUFFIX = ".json"
MERGED_SPLIT = 3
LINEAGE_SPLIT = 11
LINEAGE_MIN_FIELDS = 10
TAXID_MIN = -(2 ** 63)
TAXID_MAX = 2 ** 63 - 1

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')

def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the asdb-taxa application.

    Args:
        verbose: Whether to enable verbose (DEBUG) logging

    Returns:
        Logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    return logging.getLogger('asdb_taxa')

def is_taxid(value) -> bool:
    """Check that a deserialized value is an integer that fits in 64 bits."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and TAXID_MIN <= value <= TAXID_MAX
    )

def parse_taxid(text: str) -> int:
    """
    Parse a taxon ID field as a signed 64-bit integer.

    Args:
        text: Field text, already stripped

    Returns:
        Integer taxon ID

    Raises:
        TaxIdParseError: If the text is not an integer or overflows 64 bits
    """
    if not _INTEGER_RE.fullmatch(text):
        raise TaxIdParseError(f"Failed to parse int: {text!r}")
    value = int(text)
    if not TAXID_MIN <= value <= TAXID_MAX:
        raise TaxIdParseError(f"Failed to parse int: {text!r} is out of range")
    return value
