"""Taxon cache: build, persist and reload ID to lineage mappings."""

import io
import json
import logging
from contextlib import ExitStack
from pathlib import Path
from typing import Dict, Tuple, Set, Iterator, Union, Any, IO

from asdb_taxa.models.errors import TaxaIOError, CacheFormatError, TaxIdParseError
from asdb_taxa.models.taxonomic import LineageRecord
from asdb_taxa.core.utils import parse_taxid, is_taxid
from asdb_taxa.core.scanner import find_taxids
from asdb_taxa.core.merged import populate_merged_ids
from asdb_taxa.core.lineage import populate_mappings
from asdb_taxa.io.parsers import DumpStream

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

class TaxonCache:
    """
    Lineage records for the taxon IDs referenced by an ASDB data directory.

    Holds two maps: deprecated_ids (old taxon ID to the ID it was merged
    into) and mappings (current taxon ID to LineageRecord). Successive
    builds add to both maps; loading a saved cache replaces them.
    """

    def __init__(self):
        self.deprecated_ids: Dict[int, int] = {}
        self.mappings: Dict[int, LineageRecord] = {}

    def __repr__(self):
        return f"TaxonCache(deprecated_ids={len(self.deprecated_ids)}, mappings={len(self.mappings)})"

    def __len__(self):
        return len(self.mappings)

    def __eq__(self, other):
        if not isinstance(other, TaxonCache):
            return NotImplemented
        return self.deprecated_ids == other.deprecated_ids and self.mappings == other.mappings

    def initialise(
        self,
        taxdump: DumpStream,
        merged_id_dump: DumpStream,
        taxids: Set[int]
    ) -> None:
        """
        Add lineages for a working set of taxon IDs.

        Merged IDs are resolved first, which updates taxids in place, then
        the lineage dump is filtered against the resolved set.

        Args:
            taxdump: Readable stream of rankedlineage.dmp rows
            merged_id_dump: Readable stream of merged.dmp rows
            taxids: Working set of taxon IDs, mutated in place

        Raises:
            TaxIdParseError: If a dump row has a malformed ID
            DumpFormatError: If a lineage row has too few fields
        """
        populate_merged_ids(merged_id_dump, taxids, self.deprecated_ids)
        populate_mappings(taxdump, taxids, self.deprecated_ids, self.mappings)

    def initialise_from_paths(
        self,
        taxdump_path: PathLike,
        merged_id_dump_path: PathLike,
        datadir_path: PathLike
    ) -> None:
        """
        Scan a data directory and add lineages for the taxa it references.

        Args:
            taxdump_path: Path to rankedlineage.dmp
            merged_id_dump_path: Path to merged.dmp
            datadir_path: Directory of ASDB JSON records

        Raises:
            TaxaIOError: If a file or the directory cannot be read
        """
        taxids = find_taxids(datadir_path)
        # Both dumps are opened before either map is touched
        with ExitStack() as stack:
            try:
                merged_id_dump = stack.enter_context(open(merged_id_dump_path, "rb"))
                taxdump = stack.enter_context(open(taxdump_path, "rb"))
            except OSError as e:
                raise TaxaIOError(f"Error opening taxonomy dump: {str(e)}")
            self.initialise(taxdump, merged_id_dump, taxids)

    def to_document(self) -> Dict[str, Any]:
        """Convert the cache to the dict written by save(), ordered by ID."""
        return {
            "deprecated_ids": {
                str(old_id): self.deprecated_ids[old_id]
                for old_id in sorted(self.deprecated_ids)
            },
            "mappings": {
                str(tax_id): self.mappings[tax_id].as_dict()
                for tax_id in sorted(self.mappings)
            }
        }

    def save(self, output: IO) -> int:
        """
        Write the cache as a JSON document.

        Args:
            output: Writable text or binary stream

        Returns:
            Number of lineage records written

        Raises:
            CacheFormatError: If the cache cannot be serialized
            TaxaIOError: If the stream cannot be written
        """
        try:
            json_data = json.dumps(self.to_document())
        except (TypeError, ValueError) as e:
            raise CacheFormatError(f"Failed to serialize cache: {str(e)}")

        try:
            if isinstance(output, io.TextIOBase):
                output.write(json_data)
            else:
                output.write(json_data.encode("utf-8"))
        except OSError as e:
            raise TaxaIOError(f"Error writing cache: {str(e)}")

        return len(self.mappings)

    def save_path(self, outfile: PathLike) -> int:
        """Write the cache to outfile, replacing any existing file."""
        try:
            with open(outfile, "w", encoding="utf-8") as out:
                count = self.save(out)
        except OSError as e:
            raise TaxaIOError(f"Error writing cache file {outfile}: {str(e)}")
        logger.info(f"Saved {count} cache entries to {outfile}")
        return count

    def load(self, source: IO) -> int:
        """
        Replace the cache contents with a JSON document written by save().

        Args:
            source: Readable text or binary stream

        Returns:
            Number of lineage records loaded

        Raises:
            CacheFormatError: If the document is malformed
            TaxaIOError: If the stream cannot be read
        """
        try:
            json_data = source.read()
        except OSError as e:
            raise TaxaIOError(f"Error reading cache: {str(e)}")

        try:
            document = json.loads(json_data)
        except (ValueError, TypeError) as e:
            raise CacheFormatError(f"Failed to parse JSON: {str(e)}")

        deprecated_ids, mappings = _maps_from_document(document)
        self.deprecated_ids = deprecated_ids
        self.mappings = mappings

        return len(self.mappings)

    def load_path(self, infile: PathLike) -> int:
        """Replace the cache contents with the document stored in infile."""
        try:
            with open(infile, "rb") as handle:
                count = self.load(handle)
        except OSError as e:
            raise TaxaIOError(f"Error reading cache file {infile}: {str(e)}")
        logger.info(f"Loaded {count} cache entries from {infile}")
        return count

    @classmethod
    def from_path(cls, infile: PathLike) -> 'TaxonCache':
        """Create a cache from a file written by save_path()."""
        cache = cls()
        cache.load_path(infile)
        return cache

    def entries(self) -> Iterator[Tuple[int, str]]:
        """Yield (tax_id, name) for every cached record, ordered by ID."""
        for tax_id in sorted(self.mappings):
            yield tax_id, self.mappings[tax_id].name

def _maps_from_document(document: Any) -> Tuple[Dict[int, int], Dict[int, LineageRecord]]:
    if not isinstance(document, dict):
        raise CacheFormatError("Cache document must be a JSON object")
    for key in ("deprecated_ids", "mappings"):
        if not isinstance(document.get(key), dict):
            raise CacheFormatError(f"Cache document has no '{key}' object")

    try:
        deprecated_ids = {}
        for old_id, new_id in document["deprecated_ids"].items():
            if not is_taxid(new_id):
                raise CacheFormatError(f"Merged ID for {old_id} is not a 64-bit integer: {new_id!r}")
            deprecated_ids[parse_taxid(old_id)] = new_id

        mappings = {
            parse_taxid(tax_id): LineageRecord.from_dict(record)
            for tax_id, record in document["mappings"].items()
        }
    except TaxIdParseError as e:
        raise CacheFormatError(f"Cache document has a malformed key: {str(e)}")

    return deprecated_ids, mappings
