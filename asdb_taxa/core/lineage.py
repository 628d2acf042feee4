"""Build lineage records from rankedlineage.dmp."""

import logging
from typing import List, Dict, Set

from asdb_taxa.io.parsers import get_parser, DumpStream
from asdb_taxa.models.errors import DumpFormatError
from asdb_taxa.core.utils import LINEAGE_MIN_FIELDS
from asdb_taxa.models.taxonomic import LineageRecord

logger = logging.getLogger(__name__)

def short_species(species: str) -> str:
    """
    Reduce a species column to its last word.

    Strips the genus (and any other leading words) from names like
    "Streptomyces examplis". Text without whitespace is returned as is.

    Args:
        species: Species column text

    Returns:
        Last whitespace-delimited token of species
    """
    tokens = species.split()
    return tokens[-1] if tokens else species

def lineage_from_fields(tax_id: int, fields: List[str]) -> LineageRecord:
    """
    Create the lineage record for one rankedlineage.dmp row.

    Args:
        tax_id: Current taxon ID the record is stored under
        fields: Normalized row fields, at least ten of them

    Returns:
        LineageRecord for the row
    """
    return LineageRecord(
        tax_id=tax_id,
        name=fields[1],
        species=short_species(fields[2]),
        genus=fields[3],
        family=fields[4],
        order=fields[5],
        class_=fields[6],
        phylum=fields[7],
        kingdom=fields[8],
        superkingdom=fields[9]
    )

def populate_mappings(
    taxdump: DumpStream,
    taxids: Set[int],
    deprecated_ids: Dict[int, int],
    mappings: Dict[int, LineageRecord]
) -> int:
    """
    Fill mappings with lineage records for every ID in the working set.

    Each row's tax_id is first redirected through deprecated_ids. Rows
    whose resolved ID is not in taxids are skipped without looking at
    their other fields. A later row for the same ID replaces an earlier
    one.

    Args:
        taxdump: Readable stream of rankedlineage.dmp rows
        taxids: Resolved working set of taxon IDs
        deprecated_ids: Map of old to current IDs
        mappings: Map of taxon ID to LineageRecord, updated in place

    Returns:
        Number of records written from this dump

    Raises:
        DumpFormatError: If a row for an ID in taxids has too few fields
        TaxIdParseError: If a row's tax_id is malformed
    """
    written = 0
    for lineno, nominal_id, fields in get_parser("lineage").parse(taxdump):
        tax_id = deprecated_ids.get(nominal_id, nominal_id)
        if tax_id not in taxids:
            continue

        if len(fields) < LINEAGE_MIN_FIELDS:
            raise DumpFormatError(
                f"Line {lineno} has {len(fields)} fields, expected at least {LINEAGE_MIN_FIELDS}"
            )
        mappings[tax_id] = lineage_from_fields(tax_id, fields)
        written += 1

    missing = len(taxids.difference(mappings))
    if missing:
        logger.info(f"{missing} taxon IDs have no lineage in the dump")
    logger.info(f"Added {written} lineage records")
    return written
