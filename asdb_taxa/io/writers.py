"""File writers for asdb-taxa."""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from asdb_taxa.models.errors import TaxaIOError
from asdb_taxa.models.taxonomic import RECORD_KEYS

logger = logging.getLogger(__name__)

def cache_to_lineage_df(cache) -> pd.DataFrame:
    """
    Convert the records of a taxon cache to a DataFrame.

    Args:
        cache: TaxonCache to convert

    Returns:
        DataFrame with one row per record, ordered by tax_id, columns as RECORD_KEYS
    """
    rows = [cache.mappings[tax_id].as_tuple() for tax_id in sorted(cache.mappings)]
    lineage_df = pd.DataFrame(rows, columns=RECORD_KEYS)
    return lineage_df.astype({'tax_id': 'int64'})

def write_lineage_table(cache, tsv_output_path: Union[str, Path]) -> pd.DataFrame:
    """
    Write the records of a taxon cache as a tab-separated lineage table.

    Args:
        cache: TaxonCache to export
        tsv_output_path: Path to output .tsv file

    Returns:
        DataFrame that was written

    Raises:
        TaxaIOError: If the output file cannot be written
    """
    lineage_df = cache_to_lineage_df(cache)
    try:
        lineage_df.to_csv(tsv_output_path, sep='\t', index=False)
    except OSError as e:
        raise TaxaIOError(f"Error writing lineage table: {str(e)}")
    logger.info(f"Wrote {len(lineage_df)} lineages to {tsv_output_path}")
    return lineage_df
