#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for StrandIO.

This module provides a thin click wrapper around the reader/writer facade:
format conversion, record counting, summary statistics and configuration
management.
"""

import logging
import sys
import click
from pathlib import Path
import yaml

from .version import __version__
from .config import ConfigParser, ConfigValidationError, save_config_template
from .io import SeqIOError, count_records, describe_extensions, read_records, transcode
from .utils import summarize_records

logger = logging.getLogger(__name__)


def setup_logging(level: str, fmt: str):
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=fmt,
        handlers=[logging.StreamHandler()],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose (DEBUG) logging')
@click.option('--quiet', '-q', is_flag=True, help='Only log errors')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='Configuration file (YAML)')
@click.pass_context
def main(ctx, verbose, quiet, config_file):
    """
    StrandIO: unified FASTA/FASTQ/BAM reader and writer.

    Opens any supported file by its extension and converts records between
    formats.
    """
    ctx.ensure_object(dict)

    try:
        parser = ConfigParser(config_file)
        parser.validate()
    except (ConfigValidationError, OSError) as e:
        click.echo(f"✗ Error loading configuration: {e}", err=True)
        sys.exit(1)

    if verbose:
        parser.merge_cli_overrides({'logging.level': 'DEBUG'})
    elif quiet:
        parser.merge_cli_overrides({'logging.level': 'ERROR'})

    setup_logging(parser.get('logging.level', 'INFO'), parser.get('logging.format'))

    ctx.obj['CONFIG'] = parser
    ctx.obj['QUIET'] = quiet


# ============================================================================
# Record Commands
# ============================================================================

@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('output_file', type=click.Path(dir_okay=False))
@click.option('--line-width', '-w', type=click.IntRange(min=0), default=None,
              help='Wrap FASTA output at this many bases (0 = single line)')
@click.option('--compresslevel', type=click.IntRange(1, 9), default=None,
              help='gzip level for compressed output')
@click.option('--lenient', is_flag=True,
              help='Drop a truncated final FASTQ record instead of failing')
@click.pass_context
def convert(ctx, input_file, output_file, line_width, compresslevel, lenient):
    """Convert INPUT_FILE to OUTPUT_FILE; formats come from the extensions."""
    parser = ctx.obj['CONFIG']
    parser.merge_cli_overrides({
        'io.fasta_line_width': line_width,
        'io.gzip_compresslevel': compresslevel,
        'io.strict_fastq': False if lenient else None,
    })
    io_config = parser.get_io_config()

    try:
        count = transcode(
            input_file,
            output_file,
            fasta_line_width=io_config['fasta_line_width'],
            compresslevel=io_config['gzip_compresslevel'],
            strict_fastq=io_config['strict_fastq'],
        )
    except (SeqIOError, OSError) as e:
        click.echo(f"✗ Conversion failed: {e}", err=True)
        sys.exit(1)

    if not ctx.obj['QUIET']:
        click.echo(f"✓ Wrote {count} records to {output_file}")


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def count(ctx, input_file):
    """Print the number of records in INPUT_FILE."""
    strict = ctx.obj['CONFIG'].get('io.strict_fastq', True)
    try:
        n = count_records(input_file, strict_fastq=strict)
    except (SeqIOError, OSError) as e:
        click.echo(f"✗ Error reading {input_file}: {e}", err=True)
        sys.exit(1)

    click.echo(str(n))


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--format', '-f', 'output_format', type=click.Choice(['summary', 'yaml']),
              default='summary', help='Output format')
@click.pass_context
def stats(ctx, input_file, output_format):
    """Summarize the records in INPUT_FILE (lengths, N50, GC content)."""
    strict = ctx.obj['CONFIG'].get('io.strict_fastq', True)
    try:
        summary = summarize_records(read_records(input_file, strict_fastq=strict))
    except (SeqIOError, OSError) as e:
        click.echo(f"✗ Error reading {input_file}: {e}", err=True)
        sys.exit(1)

    if output_format == 'yaml':
        click.echo(yaml.dump(summary, default_flow_style=False, sort_keys=False))
        return

    click.echo(f"Statistics for: {input_file}")
    click.echo("=" * 60)
    if not summary:
        click.echo("  No records")
        return
    click.echo(f"  Records:      {summary['num_records']}")
    click.echo(f"  Total length: {summary['total_length']}")
    click.echo(f"  Min length:   {summary['min_length']}")
    click.echo(f"  Max length:   {summary['max_length']}")
    click.echo(f"  Mean length:  {summary['mean_length']:.1f}")
    click.echo(f"  N50:          {summary['n50']} (L50 {summary['l50']})")
    click.echo(f"  GC content:   {summary['mean_gc_content']:.3f}")


@main.command()
def formats():
    """List recognized file extensions."""
    click.echo(f"{'extension':<10} {'format':<7} {'gzip':<5} {'read':<5} write")
    for ext, info in describe_extensions().items():
        click.echo(
            f"{ext:<10} {info['format']:<7} "
            f"{'yes' if info['gzip'] else 'no':<5} "
            f"{'yes' if info['read'] else 'no':<5} "
            f"{'yes' if info['write'] else 'no'}"
        )


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group('config')
def config_group():
    """Configuration management commands."""
    pass


@config_group.command('init')
@click.option('--output', '-o', type=click.Path(dir_okay=False), default='strandio_config.yaml',
              help='Output configuration file path')
def config_init(output):
    """Generate a configuration file with the default settings."""
    try:
        save_config_template(Path(output))
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Configuration file created: {output}")


@config_group.command('show')
@click.argument('config_file', type=click.Path(exists=True, dir_okay=False))
def config_show(config_file):
    """Display the effective configuration (defaults merged with CONFIG_FILE)."""
    try:
        parser = ConfigParser(config_file)
        parser.validate()
    except (ConfigValidationError, OSError) as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    click.echo(yaml.dump(parser.to_dict(), default_flow_style=False, sort_keys=False))


if __name__ == '__main__':
    main()
