"""Scan an ASDB data directory for referenced taxon IDs."""

import re
import logging
from pathlib import Path
from typing import List, Set, Union

from asdb_taxa.models.errors import TaxaIOError, PatternError, TaxIdParseError
from asdb_taxa.core.utils import TAXON_PATTERN, CORPUS_SUFFIX, parse_taxid

logger = logging.getLogger(__name__)

def list_corpus_files(datadir: Union[str, Path]) -> List[Path]:
    """
    List the JSON files of a data directory in lexicographic order.

    Args:
        datadir: Directory holding ASDB JSON records

    Returns:
        Sorted list of paths to regular files with a .json suffix

    Raises:
        TaxaIOError: If the directory cannot be read
    """
    try:
        entries = [
            path for path in Path(datadir).iterdir()
            if path.suffix == CORPUS_SUFFIX and path.is_file()
        ]
    except OSError as e:
        raise TaxaIOError(f"Error reading data directory {datadir}: {str(e)}")
    return sorted(entries)

def find_taxids(datadir: Union[str, Path], pattern: str = TAXON_PATTERN) -> Set[int]:
    """
    Collect the taxon IDs referenced by the records in a data directory.

    Only the first reference in each file is used. Files without a
    reference, or whose reference does not fit a 64-bit integer, are
    skipped without error.

    Args:
        datadir: Directory holding ASDB JSON records
        pattern: Regular expression whose first group captures the ID

    Returns:
        Set of referenced taxon IDs

    Raises:
        PatternError: If the pattern fails to compile
        TaxaIOError: If the directory or one of its files cannot be read
    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise PatternError(f"Failed to generate regex: {str(e)}")

    taxids = set()
    for path in list_corpus_files(datadir):
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TaxaIOError(f"Error reading {path}: {str(e)}")

        match = regex.search(content)
        if match is None or match.group(1) is None:
            logger.debug(f"No taxon reference in {path}")
            continue
        try:
            taxids.add(parse_taxid(match.group(1)))
        except TaxIdParseError as e:
            logger.debug(f"Skipping {path}: {str(e)}")

    logger.info(f"Found {len(taxids)} referenced taxon IDs in {datadir}")
    return taxids
