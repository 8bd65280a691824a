#!/usr/bin/env python3
"""
Media Format

Render byte sizes, durations, bitrates and resolution labels the way the
media library UI displays them.
"""

import sys
import click
from dotenv import load_dotenv
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from config import (
    DEFAULT_BYTES_DECIMALS,
    DEFAULT_PERCENT_DECIMALS,
    DEFAULT_EXPORT_EXTENSION,
    ENV_BYTES_DECIMALS,
    ENV_PERCENT_DECIMALS,
)
from utils import (
    format_bytes,
    format_duration,
    format_bitrate,
    parse_resolution,
    get_quality_category,
    get_size_category,
    calculate_percentage,
    sanitize_filename,
    get_timestamp_string,
    build_export_filename,
    format_number,
)
from cli.validation import validate_number_argument, validate_extension
from cli.output import ResultPrinter, should_use_plain_output

__version__ = "1.0.0"

# Load environment variables from .env file
load_dotenv()


def number_argument(ctx, param, value):
    """Click callback turning a raw argument into a validated number."""
    if value is None:
        return None
    is_valid, number, error = validate_number_argument(param.name, value)
    if not is_valid:
        raise click.BadParameter(error, ctx=ctx, param=param)
    return number


def debug(ctx: click.Context, message: str) -> None:
    """Echo a diagnostic line to stderr when --verbose is set."""
    if ctx.obj and ctx.obj.get('verbose'):
        click.echo(f"[debug] {message}", err=True)


def fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


class MediaFormatGroup(click.Group):
    """Group that reports library errors and interrupts uniformly."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            click.echo("\nOperation cancelled by user.", err=True)
            sys.exit(1)
        except ValueError as e:
            fail(str(e))


@click.group(cls=MediaFormatGroup)
@click.option('--plain', is_flag=True, help='Force plain text output (auto-enabled when piping)')
@click.option('--verbose', '-v', is_flag=True, help='Echo resolved inputs to stderr')
@click.version_option(version=__version__)
@click.pass_context
def main(ctx, plain, verbose):
    """Media Format

    Format sizes, durations, bitrates and resolution labels for display.
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['printer'] = ResultPrinter(plain=plain or should_use_plain_output())


@main.command('bytes')
@click.argument('value', callback=number_argument)
@click.option('--decimals', '-d', type=int, default=DEFAULT_BYTES_DECIMALS, envvar=ENV_BYTES_DECIMALS,
              show_default=True, help='Maximum decimal places')
@click.pass_context
def bytes_command(ctx, value, decimals):
    """Format a byte count (e.g. 1536 -> 1.5 KB)."""
    debug(ctx, f"bytes={value} decimals={decimals}")
    ctx.obj['printer'].print_value(format_bytes(value, decimals))


@main.command()
@click.argument('milliseconds', callback=number_argument)
@click.pass_context
def duration(ctx, milliseconds):
    """Format a duration given in milliseconds (e.g. 65000 -> 1m 5s)."""
    debug(ctx, f"milliseconds={milliseconds}")
    ctx.obj['printer'].print_value(format_duration(milliseconds))


@main.command()
@click.argument('bps', callback=number_argument)
@click.pass_context
def bitrate(ctx, bps):
    """Format a bitrate in bits per second (e.g. 2500000 -> 2.5 Mbps)."""
    debug(ctx, f"bps={bps}")
    ctx.obj['printer'].print_value(format_bitrate(bps))


@main.command()
@click.argument('text')
@click.pass_context
def resolution(ctx, text):
    """Extract WIDTHxHEIGHT from a resolution label."""
    parsed = parse_resolution(text)
    debug(ctx, f"text={text!r} parsed={parsed!r}")
    if parsed is None:
        fail(f"No resolution found in '{text}'")
    ctx.obj['printer'].print_value(str(parsed))


@main.command()
@click.argument('text')
@click.pass_context
def quality(ctx, text):
    """Classify a resolution label (4K, 1080p, 720p, 480p, SD)."""
    debug(ctx, f"text={text!r}")
    ctx.obj['printer'].print_value(get_quality_category(text))


@main.command('size-category')
@click.argument('value', callback=number_argument)
@click.pass_context
def size_category(ctx, value):
    """Classify a byte count into a size bucket."""
    debug(ctx, f"bytes={value}")
    ctx.obj['printer'].print_value(get_size_category(value))


@main.command()
@click.argument('value', callback=number_argument)
@click.argument('total', callback=number_argument)
@click.option('--decimals', '-d', type=int, default=DEFAULT_PERCENT_DECIMALS, envvar=ENV_PERCENT_DECIMALS,
              show_default=True, help='Decimal places')
@click.pass_context
def percent(ctx, value, total, decimals):
    """Compute VALUE as a percentage of TOTAL."""
    debug(ctx, f"value={value} total={total} decimals={decimals}")
    result = calculate_percentage(value, total, decimals)
    ctx.obj['printer'].print_value(f"{format_number(result)}%")


@main.command()
@click.argument('name')
@click.pass_context
def sanitize(ctx, name):
    """Make NAME safe to use as a filename."""
    debug(ctx, f"name={name!r}")
    ctx.obj['printer'].print_value(sanitize_filename(name))


@main.command()
@click.pass_context
def timestamp(ctx):
    """Print today's UTC date as YYYY-MM-DD."""
    ctx.obj['printer'].print_value(get_timestamp_string())


@main.command('export-name')
@click.argument('prefix')
@click.option('--extension', '-e', default=DEFAULT_EXPORT_EXTENSION, show_default=True,
              help='File extension')
@click.pass_context
def export_name(ctx, prefix, extension):
    """Build a dated export filename (e.g. size-analysis-2024-12-01.csv)."""
    is_valid, error = validate_extension(extension)
    if not is_valid:
        fail(error)
    debug(ctx, f"prefix={prefix!r} extension={extension!r}")
    ctx.obj['printer'].print_value(build_export_filename(prefix, extension))


@main.command()
@click.option('--size', 'size_bytes', callback=number_argument, help='File size in bytes')
@click.option('--duration', 'milliseconds', callback=number_argument, help='Duration in milliseconds')
@click.option('--bitrate', 'bps', callback=number_argument, help='Bitrate in bits per second')
@click.option('--resolution', 'resolution_text', help='Resolution label, e.g. 1920x1080')
@click.pass_context
def describe(ctx, size_bytes, milliseconds, bps, resolution_text):
    """Describe a media file from its raw fields."""
    rows = []
    if size_bytes is not None:
        rows.append(('Size', format_bytes(size_bytes)))
        rows.append(('Size category', get_size_category(size_bytes)))
    if milliseconds is not None:
        rows.append(('Duration', format_duration(milliseconds)))
    if bps is not None:
        rows.append(('Bitrate', format_bitrate(bps)))
    if resolution_text is not None:
        parsed = parse_resolution(resolution_text)
        rows.append(('Resolution', str(parsed) if parsed else 'Unknown'))
        rows.append(('Quality', get_quality_category(resolution_text)))

    if not rows:
        fail("Nothing to describe. Pass at least one of --size, --duration, --bitrate, --resolution.")

    debug(ctx, f"fields={len(rows)}")
    ctx.obj['printer'].print_rows(rows, title='Media file')


if __name__ == '__main__':
    main()
