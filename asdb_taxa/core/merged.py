"""Resolution of merged (deprecated) taxon IDs."""

import logging
from typing import Dict, Set

from asdb_taxa.io.parsers import get_parser, DumpStream

logger = logging.getLogger(__name__)

def populate_merged_ids(
    merged_id_dump: DumpStream,
    taxids: Set[int],
    deprecated_ids: Dict[int, int]
) -> int:
    """
    Learn redirects from merged.dmp for IDs in the working set.

    For every row whose old ID is currently in taxids, the old -> new
    redirect is recorded and taxids is updated in place to hold the new
    ID instead of the old one. Chains are not followed: each row is
    applied once, against the set as it stands when the row is read.

    Args:
        merged_id_dump: Readable stream of merged.dmp rows
        taxids: Working set of taxon IDs, mutated in place
        deprecated_ids: Map of old to current IDs, updated in place

    Returns:
        Number of redirects learned from this dump

    Raises:
        TaxIdParseError: If a row has a missing or malformed ID
    """
    learned = 0
    for old_id, new_id in get_parser("merged").parse(merged_id_dump):
        if old_id not in taxids:
            continue

        logger.debug(f"Taxon {old_id} was merged into {new_id}")
        deprecated_ids[old_id] = new_id
        taxids.discard(old_id)
        taxids.add(new_id)
        learned += 1

    logger.info(f"Resolved {learned} merged taxon IDs")
    return learned
