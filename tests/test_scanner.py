"""Tests for asdb_taxa/core/scanner.py"""
import pytest

from asdb_taxa.core.scanner import find_taxids, list_corpus_files
from asdb_taxa.models.errors import TaxaIOError, PatternError

from conftest import write_record

def test_find_taxids_only_json_files(datadir):
    assert find_taxids(datadir) == {12345, 562}

def test_first_reference_per_file_wins(tmp_path):
    (tmp_path / "multi.json").write_text('{"x": "taxon:11", "y": "taxon:22"}')
    assert find_taxids(tmp_path) == {11}

def test_files_without_usable_reference_are_skipped(tmp_path):
    (tmp_path / "none.json").write_text('{"organism": "unknown"}')
    (tmp_path / "huge.json").write_text('"taxon:99999999999999999999"')
    (tmp_path / "unquoted.json").write_text('taxon:42')
    write_record(tmp_path, "ok.json", "7")
    assert find_taxids(tmp_path) == {7}

def test_duplicate_references_are_deduplicated(tmp_path):
    write_record(tmp_path, "one.json", "562")
    write_record(tmp_path, "two.json", "562")
    assert find_taxids(tmp_path) == {562}

def test_corpus_files_sorted_and_filtered(tmp_path):
    for name in ["c.json", "a.json", "b.JSON", "d.json.bak"]:
        (tmp_path / name).write_text("{}")
    (tmp_path / "sub.json").mkdir()
    assert [p.name for p in list_corpus_files(tmp_path)] == ["a.json", "c.json"]

def test_missing_directory_raises(tmp_path):
    with pytest.raises(TaxaIOError):
        find_taxids(tmp_path / "missing")

def test_file_instead_of_directory_raises(tmp_path):
    path = tmp_path / "file.json"
    path.write_text("{}")
    with pytest.raises(TaxaIOError):
        find_taxids(path)

def test_bad_pattern_raises(tmp_path):
    with pytest.raises(PatternError):
        find_taxids(tmp_path, pattern="(")
