"""Configuration management for asdb-taxa."""

import os
from pathlib import Path
from typing import Optional, Any

from asdb_taxa.models.errors import TaxaError

CACHE_ENV_VAR = "ASDB_TAXA_CACHE"

class ConfigError(TaxaError):
    """Raised when there's an issue with configuration."""
    pass

class TaxaConfig:
    """Centralized configuration for asdb-taxa."""

    def __init__(self, args: Optional[Any] = None):
        """
        Initialize configuration from args and environment.

        Args:
            args: Arguments from argparse

        Raises:
            ConfigError: If required configuration is missing
        """
        self.command = getattr(args, 'command', None)
        self.verbose = getattr(args, 'verbose', False)

        # Cache file is needed by every command
        cache = getattr(args, 'cache', None) or os.environ.get(CACHE_ENV_VAR)
        if not cache:
            raise ConfigError(f"Cache file not specified. Either 'export {CACHE_ENV_VAR}=<path_to_cache>' or utilize '--cache' parameter.")
        self.cache = Path(cache)

        # Init and add read the same inputs
        if self.command in ['init', 'add']:
            self.datadir = self._required_path(args, 'datadir')
            self.mergeddump = self._required_path(args, 'mergeddump')
            self.taxdump = self._required_path(args, 'taxdump')

        elif self.command == 'export':
            self.output = self._required_path(args, 'output')

    def _required_path(self, args: Any, name: str) -> Path:
        value = getattr(args, name, None)
        if not value:
            raise ConfigError(f"Command '{self.command}' requires '--{name}'")
        return Path(value)
