"""Error classes for asdb-taxa."""

class TaxaError(Exception):
    """Base class for asdb-taxa exceptions."""
    pass

class TaxaIOError(TaxaError):
    """Raised when a file or directory cannot be read or written."""
    pass

class TaxIdParseError(TaxaError):
    """Raised when a dump row carries a malformed taxon ID."""
    pass

class DumpFormatError(TaxaError):
    """Raised when a dump row has fewer fields than expected."""
    pass

class CacheFormatError(TaxaError):
    """Raised when a persisted cache document cannot be parsed."""
    pass

class PatternError(TaxaError):
    """Raised when the taxon reference pattern fails to compile."""
    pass

class TaxIdNotFoundError(TaxaError):
    """Raised when a taxon ID is not present in the cache."""

    def __init__(self, tax_id: int):
        super().__init__(f"TaxID not found: {tax_id}")
        self.tax_id = tax_id

class InvalidTaxIdError(TaxaError):
    """Raised when a taxon ID is not acceptable."""
    pass
