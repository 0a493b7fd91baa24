"""
Command-line interface for uniprot2peff.

uniprot2peff: UniProtKB XML to PEFF converter
"""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import ModProfile, load_config
from .converter import PeffConverter
from .errors import ConversionError
from .io.output import write_statistics_tsv


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.version_option(version=__version__)
@click.argument('input_path', type=click.Path(dir_okay=False, path_type=Path))
@click.argument('output_path', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--strict', is_flag=True,
              help='Exit on unmapped PTMs (default: skip)')
@click.option('--no-ptms', is_flag=True,
              help='Disable PTM processing (default: enabled)')
@click.option('--variant-simple', is_flag=True,
              help='Enable VariantSimple processing (default: disabled)')
@click.option('--variant-complex', is_flag=True,
              help='Enable VariantComplex processing (default: disabled)')
@click.option('--unimod', is_flag=True,
              help='Encode PTMs as Unimod accessions (\\ModResUnimod) instead of PSI-MOD')
@click.option('--line-width', type=click.IntRange(min=0), default=None,
              help='Residues per sequence line, 0 for no folding (default: 60)')
@click.option('--exclude-marker', type=str, default=None,
              help='Skip simple variants whose description contains this text (default: SGRP)')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='YAML configuration file; command-line flags take precedence')
@click.option('--stats', 'stats_path', type=click.Path(dir_okay=False, path_type=Path),
              help='Write run statistics to this TSV file')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable debug logging')
def cli(input_path, output_path, strict, no_ptms, variant_simple, variant_complex,
        unimod, line_width, exclude_marker, config_path, stats_path, verbose):
    """
    Convert UniProtKB XML to PEFF.

    Modified residues are written as \\ModResPsi (or \\ModResUnimod) tuples,
    sequence variants as \\VariantSimple and \\VariantComplex tuples.

    \b
    Example:
      uniprot2peff uniprot_sprot.xml sprot.peff --variant-simple --variant-complex

    \b
    Example with a config file:
      uniprot2peff uniprot_sprot.xml sprot.peff --config peff.yaml --strict
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    # Flags can only switch options on; an absent flag keeps the config value
    try:
        config = load_config(
            config_path,
            strict=True if strict else None,
            enable_ptms=False if no_ptms else None,
            variant_simple=True if variant_simple else None,
            variant_complex=True if variant_complex else None,
            mod_profile=ModProfile.UNIMOD if unimod else None,
            line_width=line_width,
            exclude_marker=exclude_marker,
        )
    except ConversionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        converter = PeffConverter(config)
        stats = converter.run(input_path, output_path)
        if stats_path:
            write_statistics_tsv(stats, stats_path)
    except ConversionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(
        f"Done. Processed {stats.entries_processed} entries, "
        f"{stats.entries_missing_fields} with missing fields.",
        err=True,
    )


def main(args=None):
    """
    Console entry point.

    Usage errors (missing arguments, unknown options) exit with status 1.
    """
    try:
        rv = cli.main(args=args, prog_name='uniprot2peff', standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    sys.exit(rv if isinstance(rv, int) else 0)


if __name__ == '__main__':
    main()
