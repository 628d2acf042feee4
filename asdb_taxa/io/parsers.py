"""File format parsers for NCBI taxonomy dumps."""

import logging
from typing import List, Tuple, Iterator, Union, IO
from abc import ABC, abstractmethod

from asdb_taxa.models.errors import DumpFormatError, TaxaIOError
from asdb_taxa.core.utils import (
    DUMP_SEPARATOR, UNKNOWN, MERGED_SPLIT, LINEAGE_SPLIT,
    parse_taxid
)

logger = logging.getLogger(__name__)

DumpStream = Union[IO[bytes], IO[str]]

def iter_lines(stream: DumpStream) -> Iterator[Tuple[int, str]]:
    """Yield (line number, stripped text) for each non-blank line of a dump stream.

    Args:
        stream: Readable binary or text stream

    Raises:
        DumpFormatError: If a line is not valid UTF-8
        TaxaIOError: If the stream cannot be read
    """
    try:
        for lineno, raw in enumerate(stream, start=1):
            if isinstance(raw, bytes):
                try:
                    raw = raw.decode("utf-8")
                except UnicodeDecodeError as e:
                    raise DumpFormatError(f"Line {lineno} is not valid UTF-8: {str(e)}")
            line = raw.strip()
            if line:
                yield lineno, line
    except OSError as e:
        raise TaxaIOError(f"Error reading dump: {str(e)}")

def split_dump_line(line: str, max_fields: int) -> List[str]:
    """Split a pipe-delimited line into at most max_fields stripped fields.

    The last field keeps any remaining separators, so trailing columns
    beyond max_fields - 1 end up in it untouched.
    """
    return [part.strip() for part in line.split(DUMP_SEPARATOR, max_fields - 1)]

class Parser(ABC):
    """Base parser class for pipe-delimited dump files."""

    @abstractmethod
    def parse(self, stream: DumpStream) -> Iterator:
        """Parse rows from the given stream.

        Args:
            stream: Readable binary or text stream

        Returns:
            Iterator over parsed rows
        """
        pass

class MergedParser(Parser):
    """Parser for merged.dmp rows (old_id | new_id |)."""

    def parse(self, stream: DumpStream) -> Iterator[Tuple[int, int]]:
        """Yield (old_id, new_id) for each row.

        Raises:
            TaxIdParseError: If either ID field is missing or malformed
        """
        for lineno, line in iter_lines(stream):
            parts = split_dump_line(line, MERGED_SPLIT)
            old_id = parse_taxid(parts[0])
            new_id = parse_taxid(parts[1] if len(parts) > 1 else "")
            yield old_id, new_id

class LineageParser(Parser):
    """Parser for rankedlineage.dmp rows."""

    def parse(self, stream: DumpStream) -> Iterator[Tuple[int, int, List[str]]]:
        """Yield (line number, nominal tax_id, fields) for each row.

        Empty fields are replaced with "Unknown" before the tax_id is parsed,
        so a row with an empty leading field fails to parse. The number of
        fields is not checked here; rows may be shorter than a full lineage.

        Raises:
            TaxIdParseError: If the leading field is malformed
        """
        for lineno, line in iter_lines(stream):
            fields = [part or UNKNOWN for part in split_dump_line(line, LINEAGE_SPLIT)]
            yield lineno, parse_taxid(fields[0]), fields

# Factory function to get appropriate parser
def get_parser(dump_type: str) -> Parser:
    """Get appropriate parser for dump type.

    Args:
        dump_type: 'merged' or 'lineage'

    Returns:
        Parser object
    """
    parsers = {
        'merged': MergedParser,
        'lineage': LineageParser
    }
    if dump_type not in parsers:
        raise ValueError(f"Unknown dump type: {dump_type}")
    return parsers[dump_type]()
