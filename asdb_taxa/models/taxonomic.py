"""Data models for taxonomy."""

from typing import Dict, Tuple, Any
from dataclasses import dataclass

from asdb_taxa.models.errors import CacheFormatError
from asdb_taxa.core.utils import is_taxid

# Keys used in the persisted cache document, in column order
RECORD_KEYS = [
    'tax_id', 'name', 'species', 'genus', 'family', 'order',
    'class', 'phylum', 'kingdom', 'superkingdom'
]

@dataclass(frozen=True)
class LineageRecord:
    """Represents the denormalized lineage of one taxon."""
    tax_id: int
    name: str
    species: str
    genus: str
    family: str
    order: str
    class_: str
    phylum: str
    kingdom: str
    superkingdom: str

    def as_tuple(self) -> Tuple:
        """Convert to tuple, ordered as RECORD_KEYS."""
        return (
            self.tax_id,
            self.name,
            self.species,
            self.genus,
            self.family,
            self.order,
            self.class_,
            self.phylum,
            self.kingdom,
            self.superkingdom
        )

    def as_dict(self) -> Dict[str, Any]:
        """Convert to the dict stored in the cache document."""
        return dict(zip(RECORD_KEYS, self.as_tuple()))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LineageRecord':
        """
        Create from a dict stored in the cache document.

        Args:
            data: Dict with one entry per key in RECORD_KEYS

        Returns:
            LineageRecord

        Raises:
            CacheFormatError: If a key is missing or has the wrong type
        """
        try:
            values = [data[key] for key in RECORD_KEYS]
        except (KeyError, TypeError) as e:
            raise CacheFormatError(f"Incomplete lineage record: missing {str(e)}")

        tax_id = values[0]
        if not is_taxid(tax_id):
            raise CacheFormatError(f"Lineage record tax_id is not a 64-bit integer: {tax_id!r}")
        for key, value in zip(RECORD_KEYS[1:], values[1:]):
            if not isinstance(value, str):
                raise CacheFormatError(f"Lineage record {tax_id} has non-string {key}: {value!r}")

        return cls(*values)
