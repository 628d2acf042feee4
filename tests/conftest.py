"""Pytest configuration and fixtures for asdb-taxa tests"""
import json
from pathlib import Path

import pytest

STREPTOMYCES_ROW = (
    "23456\t|\tStreptomyces examplis NBC12345\t|\tStreptomyces examplis\t|\tStreptomyces\t|\t"
    "Streptomycetaceae\t|\tStreptomycetales\t|\tActinomycetia\t|\tActinobacteria\t|\t\t|\tBacteria\t|\n"
)
ECOLI_ROW = (
    "562\t|\tEscherichia coli\t|\tEscherichia coli\t|\tEscherichia\t|\tEnterobacteriaceae\t|\t"
    "Enterobacterales\t|\tGammaproteobacteria\t|\tPseudomonadota\t|\t\t|\tBacteria\t|\n"
)
BACILLUS_ROW = (
    "1423\t|\tBacillus subtilis\t|\tBacillus subtilis\t|\tBacillus\t|\tBacillaceae\t|\t"
    "Bacillales\t|\tBacilli\t|\tBacillota\t|\t\t|\tBacteria\t|\n"
)
UNRELATED_ROW = (
    "9606\t|\tHomo sapiens\t|\tHomo sapiens\t|\tHomo\t|\tHominidae\t|\tPrimates\t|\t"
    "Mammalia\t|\tChordata\t|\tMetazoa\t|\tEukaryota\t|\n"
)

def write_record(directory: Path, name: str, taxon: str) -> Path:
    """Write a minimal ASDB-style JSON record referencing taxon."""
    path = directory / name
    path.write_text(json.dumps({"id": name, "db_xref": [f"taxon:{taxon}"]}))
    return path

@pytest.fixture
def datadir(tmp_path):
    """Corpus directory referencing 12345 (merged into 23456) and 562"""
    directory = tmp_path / "data"
    directory.mkdir()
    write_record(directory, "a.json", "12345")
    write_record(directory, "b.json", "562")
    (directory / "notes.txt").write_text('"taxon:1423"')
    return directory

@pytest.fixture
def mergeddump(tmp_path):
    """merged.dmp with the 12345 -> 23456 merge and an unrelated one"""
    path = tmp_path / "merged.dmp"
    path.write_text("12345\t|\t23456\t|\n777\t|\t888\t|\n")
    return path

@pytest.fixture
def taxdump(tmp_path):
    """rankedlineage.dmp with the taxa the corpus refers to and a few others"""
    path = tmp_path / "rankedlineage.dmp"
    path.write_text(STREPTOMYCES_ROW + ECOLI_ROW + BACILLUS_ROW + UNRELATED_ROW)
    return path
