"""Tests for asdb_taxa/io/writers.py"""
import pandas as pd

from asdb_taxa.core.cache import TaxonCache
from asdb_taxa.io.writers import cache_to_lineage_df, write_lineage_table
from asdb_taxa.models.taxonomic import LineageRecord, RECORD_KEYS

def make_cache():
    cache = TaxonCache()
    for tax_id in [30, 4]:
        cache.mappings[tax_id] = LineageRecord(tax_id, f"name {tax_id}", *["Unknown"] * 8)
    return cache

def test_cache_to_lineage_df():
    lineage_df = cache_to_lineage_df(make_cache())
    assert list(lineage_df.columns) == RECORD_KEYS
    assert lineage_df["tax_id"].tolist() == [4, 30]
    assert lineage_df["name"].tolist() == ["name 4", "name 30"]

def test_empty_cache_to_lineage_df():
    lineage_df = cache_to_lineage_df(TaxonCache())
    assert lineage_df.empty
    assert list(lineage_df.columns) == RECORD_KEYS

def test_write_lineage_table(tmp_path):
    output = tmp_path / "lineages.tsv"
    write_lineage_table(make_cache(), output)
    table = pd.read_csv(output, sep="\t")
    assert table["tax_id"].tolist() == [4, 30]
    assert table["superkingdom"].tolist() == ["Unknown", "Unknown"]
