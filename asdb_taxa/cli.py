#!/usr/bin/env python3
"""Command-line interface for asdb-taxa."""

import sys
import argparse
import logging
from typing import List, Optional

from asdb_taxa import __version__
from asdb_taxa.core.utils import setup_logging
from asdb_taxa.core.cache import TaxonCache
from asdb_taxa.models.config import TaxaConfig
from asdb_taxa.models.errors import TaxaError

logger = logging.getLogger(__name__)

def add_cache_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--cache', '-c',
        type=str,
        default=None,
        help='cache file to use (default: $ASDB_TAXA_CACHE)'
    )

def add_build_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the inputs shared by the init and add commands."""
    add_cache_argument(parser)
    parser.add_argument(
        '--datadir', '-d',
        type=str,
        required=True,
        help='ASDB json data directory to determine needed taxids'
    )
    parser.add_argument(
        '--mergeddump', '-m',
        type=str,
        required=True,
        help='TaxonDB merged ID dump file to load from'
    )
    parser.add_argument(
        '--taxdump', '-t',
        type=str,
        required=True,
        help='TaxonDB ranked lineage dump file to load from'
    )

def create_parser() -> argparse.ArgumentParser:
    """
    Create and return the main argument parser for asdb-taxa.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="asdb-taxa",
        description="Create a taxon cache for ASDB",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'%(prog)s v{__version__}'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help='asdb-taxa commands',
        required=True
    )

    init_parser = subparsers.add_parser(
        "init",
        help="Initialise a new cache",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    add_build_arguments(init_parser)

    add_parser = subparsers.add_parser(
        "add",
        help="Add more entries to an existing cache",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    add_build_arguments(add_parser)

    list_parser = subparsers.add_parser(
        "list",
        help="List current cache entries",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    add_cache_argument(list_parser)

    export_parser = subparsers.add_parser(
        "export",
        help="Write cache entries as a tab-separated lineage table",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    add_cache_argument(export_parser)
    export_parser.add_argument(
        '--output', '-o',
        type=str,
        required=True,
        help='path to output .tsv file'
    )

    return parser

def run_init(config: TaxaConfig) -> None:
    """
    Run the init command.

    Args:
        config: Configuration for the init command
    """
    taxon_cache = TaxonCache()
    taxon_cache.initialise_from_paths(config.taxdump, config.mergeddump, config.datadir)
    taxon_cache.save_path(config.cache)

def run_add(config: TaxaConfig) -> None:
    """
    Run the add command.

    Args:
        config: Configuration for the add command
    """
    taxon_cache = TaxonCache.from_path(config.cache)
    before = len(taxon_cache)
    taxon_cache.initialise_from_paths(config.taxdump, config.mergeddump, config.datadir)
    logger.info(f"Cache grew from {before} to {len(taxon_cache)} entries")
    taxon_cache.save_path(config.cache)

def run_list(config: TaxaConfig) -> None:
    """
    Run the list command.

    Args:
        config: Configuration for the list command
    """
    taxon_cache = TaxonCache.from_path(config.cache)
    for tax_id, name in taxon_cache.entries():
        print(f"{tax_id}: {name}")
    print(f"\n{len(taxon_cache)} entries total")

def run_export(config: TaxaConfig) -> None:
    """
    Run the export command.

    Args:
        config: Configuration for the export command
    """
    from asdb_taxa.io.writers import write_lineage_table

    taxon_cache = TaxonCache.from_path(config.cache)
    write_lineage_table(taxon_cache, config.output)

def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the asdb-taxa command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:]

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Setup logging
    logger = setup_logging(args.verbose)

    try:
        # Create configuration
        config = TaxaConfig(args)

        # Dispatch to appropriate command handler
        if config.command == 'init':
            run_init(config)
        elif config.command == 'add':
            run_add(config)
        elif config.command == 'list':
            run_list(config)
        elif config.command == 'export':
            run_export(config)
        else:
            logger.error(f"Unknown command: {config.command}")
            return 1

        return 0

    except TaxaError as e:
        logger.error(f"Error: {str(e)}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        return 1

if __name__ == "__main__":
    sys.exit(main())
