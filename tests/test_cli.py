"""Tests for the media-format command line interface."""

import io
import re

import pytest
from click.testing import CliRunner
from rich.console import Console

from media_format import main
from cli.output import ResultPrinter


@pytest.fixture
def runner():
    return CliRunner()


def run(runner, *args, **kwargs):
    return runner.invoke(main, ['--plain', *args], **kwargs)


class TestValueCommands:
    """Tests for the single-value sub-commands."""

    def test_bytes(self, runner):
        """Should format a byte count."""
        result = run(runner, 'bytes', '1536')
        assert result.exit_code == 0
        assert result.output.strip() == "1.5 KB"

    def test_bytes_decimals_option(self, runner):
        """Should honour --decimals."""
        result = run(runner, 'bytes', '1234567', '--decimals', '3')
        assert result.output.strip() == "1.177 MB"

    def test_bytes_decimals_from_env(self, runner):
        """Should read the default decimals from the environment."""
        result = run(runner, 'bytes', '1234567', env={'MEDIA_FORMAT_DECIMALS': '0'})
        assert result.output.strip() == "1 MB"

    def test_duration(self, runner):
        """Should format milliseconds."""
        result = run(runner, 'duration', '3661000')
        assert result.output.strip() == "1h 1m"

    def test_bitrate(self, runner):
        """Should format bits per second."""
        assert run(runner, 'bitrate', '2500000').output.strip() == "2.5 Mbps"
        assert run(runner, 'bitrate', '1500').output.strip() == "2 Kbps"

    def test_resolution(self, runner):
        """Should print the parsed dimensions."""
        result = run(runner, 'resolution', 'Movie 1920x1080 HDR')
        assert result.exit_code == 0
        assert result.output.strip() == "1920x1080"

    def test_resolution_no_match(self, runner):
        """Should fail when no resolution is present."""
        result = run(runner, 'resolution', 'garbage')
        assert result.exit_code == 1
        assert "No resolution found in 'garbage'" in result.output

    def test_quality(self, runner):
        """Should print the quality bucket."""
        assert run(runner, 'quality', '3840x2160').output.strip() == "4K"
        assert run(runner, 'quality', 'garbage').output.strip() == "Unknown"

    def test_size_category(self, runner):
        """Should print the size bucket."""
        result = run(runner, 'size-category', str(6 * 1024 ** 3))
        assert result.output.strip() == "Medium (5-20GB)"

    def test_percent(self, runner):
        """Should print a percentage."""
        assert run(runner, 'percent', '1', '3').output.strip() == "33.3%"
        assert run(runner, 'percent', '1', '0').output.strip() == "0%"

    def test_sanitize(self, runner):
        """Should sanitize the name."""
        result = run(runner, 'sanitize', 'My:File <1>.mp4')
        assert result.output.strip() == "my_file__1_.mp4"

    def test_timestamp(self, runner):
        """Should print a YYYY-MM-DD date."""
        result = run(runner, 'timestamp')
        assert re.fullmatch(r'\d{4}-\d{2}-\d{2}', result.output.strip())

    def test_export_name(self, runner):
        """Should build a dated filename."""
        result = run(runner, 'export-name', 'Size Analysis', '--extension', 'json')
        assert re.fullmatch(r'size_analysis-\d{4}-\d{2}-\d{2}\.json', result.output.strip())

    def test_export_name_bad_extension(self, runner):
        """Should reject non-alphanumeric extensions."""
        result = run(runner, 'export-name', 'report', '--extension', 'c/v')
        assert result.exit_code == 1
        assert "Extension must be alphanumeric" in result.output


class TestInputValidation:
    """Tests for numeric argument validation."""

    def test_not_a_number(self, runner):
        """Should reject non-numeric arguments."""
        result = run(runner, 'bytes', 'lots')
        assert result.exit_code == 2
        assert "must be a number" in result.output

    def test_negative(self, runner):
        """Should reject negative arguments."""
        result = run(runner, 'duration', '--', '-5')
        assert result.exit_code == 2
        assert "must not be negative" in result.output

    def test_integral_float_treated_as_int(self, runner):
        """Should format '500.0' like 500."""
        assert run(runner, 'bitrate', '500.0').output.strip() == "500 bps"


class TestDescribe:
    """Tests for the describe sub-command."""

    def test_all_fields(self, runner):
        """Should list every supplied field and its categories."""
        result = run(runner, 'describe', '--size', str(6 * 1024 ** 3), '--duration', '65000',
                     '--bitrate', '2500000', '--resolution', '1920x1080')
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines == [
            "Size: 6 GB",
            "Size category: Medium (5-20GB)",
            "Duration: 1m 5s",
            "Bitrate: 2.5 Mbps",
            "Resolution: 1920x1080",
            "Quality: 1080p",
        ]

    def test_unparseable_resolution(self, runner):
        """Should report Unknown rather than failing."""
        result = run(runner, 'describe', '--resolution', 'n/a')
        assert result.exit_code == 0
        assert "Resolution: Unknown" in result.output
        assert "Quality: Unknown" in result.output

    def test_nothing_to_describe(self, runner):
        """Should fail without any field."""
        result = run(runner, 'describe')
        assert result.exit_code == 1
        assert "Nothing to describe" in result.output


class TestVerbose:
    """Tests for --verbose diagnostics."""

    def test_verbose_echoes_inputs(self, runner):
        """Should echo resolved inputs to stderr."""
        result = runner.invoke(main, ['--plain', '--verbose', 'bytes', '2048'])
        assert result.exit_code == 0
        assert "[debug] bytes=2048 decimals=2" in result.output
        assert "2 KB" in result.output


class TestResultPrinter:
    """Tests for rich and plain result rendering."""

    def test_rich_table(self):
        """Should render rows as a titled table."""
        buffer = io.StringIO()
        printer = ResultPrinter(console=Console(file=buffer, width=60))
        printer.print_rows([('Size', '1 KB'), ('Quality', 'Very Small (<1GB)')], title='Media file')

        output = buffer.getvalue()
        assert "Media file" in output
        assert "Size" in output
        assert "1 KB" in output
        assert "Very Small (<1GB)" in output

    def test_rich_value_keeps_brackets(self):
        """Should print values verbatim, without markup."""
        buffer = io.StringIO()
        printer = ResultPrinter(console=Console(file=buffer, width=60))
        printer.print_value("[bold]raw[/bold]")

        assert buffer.getvalue().strip() == "[bold]raw[/bold]"


class TestExtremeInputs:
    """Tests for huge values passed on the command line."""

    def test_many_decimals(self, runner):
        """Should format with more places than the default decimal context."""
        result = run(runner, 'bytes', '1536', '--decimals', '30')
        assert result.exit_code == 0
        assert result.output.strip() == "1.5 KB"

    def test_huge_bitrate(self, runner):
        """Should format bitrates far past Mbps scale."""
        result = run(runner, 'bitrate', '1e40')
        assert result.exit_code == 0
        assert result.output.strip().endswith(".0 Mbps")

    def test_overflowing_percentage_reports_error(self, runner):
        """Should print an error and exit 1 instead of a traceback."""
        result = run(runner, 'percent', '1e308', '0.5')
        assert result.exit_code == 1
        assert "Error: percentage of" in result.output
        assert "Traceback" not in result.output
        assert isinstance(result.exception, SystemExit)
