#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandIO v0.1.0

Tests for CLI command interface.

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
import yaml
from click.testing import CliRunner
from strandio.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self, runner):
        """Test that --help runs without error."""
        result = runner.invoke(main, ['--help'])

        assert result.exit_code == 0
        assert 'StrandIO' in result.output

    def test_cli_version(self, runner):
        """Test that --version displays version."""
        result = runner.invoke(main, ['--version'])

        assert result.exit_code == 0
        assert '0.1.0' in result.output

    def test_invalid_command(self, runner):
        """Test that invalid commands are handled gracefully."""
        result = runner.invoke(main, ['nonexistent_command'])

        assert result.exit_code != 0

    def test_formats_listing(self, runner):
        """Test the extension table."""
        result = runner.invoke(main, ['formats'])

        assert result.exit_code == 0
        assert 'fastq' in result.output
        assert '2bit' in result.output


class TestConvertCLI:
    """Test the convert command."""

    def test_convert_fastq_to_fasta(self, runner, write_text, simple_fastq, tmp_path):
        """Test a FASTQ to FASTA conversion."""
        src = write_text("in.fq", simple_fastq)
        out = tmp_path / "out.fa"

        result = runner.invoke(main, ['convert', str(src), str(out)])

        assert result.exit_code == 0, result.output
        assert 'Wrote 2 records' in result.output
        assert out.read_text().count('>') == 2

    def test_convert_with_line_width(self, runner, write_text, tmp_path):
        """Test FASTA wrapping from the command line."""
        src = write_text("in.fa", ">a\nACGTACGT\n")
        out = tmp_path / "out.fa"

        result = runner.invoke(main, ['convert', str(src), str(out), '--line-width', '4'])

        assert result.exit_code == 0, result.output
        assert out.read_text() == ">a\nACGT\nACGT\n"

    def test_convert_line_width_from_config(self, runner, write_text, tmp_path):
        """Test that config values feed the writer."""
        src = write_text("in.fa", ">a\nACGTACGT\n")
        out = tmp_path / "out.fa"
        config = tmp_path / "c.yaml"
        config.write_text("io:\n  fasta_line_width: 2\n")

        result = runner.invoke(main, ['--config', str(config), 'convert', str(src), str(out)])

        assert result.exit_code == 0, result.output
        assert out.read_text() == ">a\nAC\nGT\nAC\nGT\n"

    def test_convert_unsupported_output(self, runner, write_text, simple_fastq, tmp_path):
        """Test that resolution errors exit with status 1."""
        src = write_text("in.fq", simple_fastq)

        result = runner.invoke(main, ['convert', str(src), str(tmp_path / "out.xyz")])

        assert result.exit_code == 1
        assert 'not accepted' in result.output

    def test_convert_onto_itself(self, runner, write_text, simple_fasta):
        """Test that converting a file onto itself fails and keeps the input."""
        src = write_text("in.fa", simple_fasta)

        result = runner.invoke(main, ['convert', str(src), str(src)])

        assert result.exit_code == 1
        assert src.read_text() == simple_fasta

    def test_line_width_from_environment(self, runner, write_text, tmp_path, monkeypatch):
        """Test a numeric config value supplied through ${VAR}."""
        monkeypatch.setenv("STRANDIO_WIDTH", "4")
        src = write_text("in.fa", ">a\nACGTACGT\n")
        out = tmp_path / "out.fa"
        config = tmp_path / "c.yaml"
        config.write_text("io:\n  fasta_line_width: ${STRANDIO_WIDTH}\n")

        result = runner.invoke(main, ['--config', str(config), 'convert', str(src), str(out)])

        assert result.exit_code == 0, result.output
        assert out.read_text() == ">a\nACGT\nACGT\n"

    def test_convert_lenient(self, runner, write_text, tmp_path):
        """Test --lenient on a truncated FASTQ file."""
        src = write_text("cut.fq", "@r1\nAC\n+\nII\n@r2\n")
        out = tmp_path / "out.fq"

        strict = runner.invoke(main, ['convert', str(src), str(out)])
        lenient = runner.invoke(main, ['convert', str(src), str(out), '--lenient'])

        assert strict.exit_code == 1
        assert lenient.exit_code == 0, lenient.output
        assert out.read_text() == "@r1\nAC\n+\nII\n"


class TestRecordCommands:
    """Test count and stats."""

    def test_count(self, runner, write_text, simple_fasta):
        """Test record counting."""
        src = write_text("in.fa", simple_fasta)

        result = runner.invoke(main, ['--quiet', 'count', str(src)])

        assert result.exit_code == 0
        assert result.output.strip().splitlines()[-1] == '2'

    def test_count_follows_strict_fastq_config(self, runner, write_text, tmp_path):
        """Test that count honours io.strict_fastq."""
        src = write_text("cut.fq", "@r1\nAC\n+\nII\n@r2\n")
        config = tmp_path / "c.yaml"
        config.write_text("io:\n  strict_fastq: false\n")

        strict = runner.invoke(main, ['--quiet', 'count', str(src)])
        lenient = runner.invoke(main, ['--quiet', '--config', str(config), 'count', str(src)])

        assert strict.exit_code == 1
        assert lenient.exit_code == 0, lenient.output
        assert lenient.output.strip().splitlines()[-1] == '1'

    def test_count_malformed(self, runner, write_text):
        """Test that malformed input exits with status 1."""
        src = write_text("bad.fa", "ACGT\n")

        result = runner.invoke(main, ['count', str(src)])

        assert result.exit_code == 1

    def test_stats_summary(self, runner, write_text, simple_fasta):
        """Test the human-readable summary."""
        src = write_text("in.fa", simple_fasta)

        result = runner.invoke(main, ['stats', str(src)])

        assert result.exit_code == 0
        assert 'Records:      2' in result.output
        assert 'N50:          8' in result.output

    def test_stats_yaml(self, runner, write_text, simple_fasta):
        """Test machine-readable stats."""
        src = write_text("in.fa", simple_fasta)

        result = runner.invoke(main, ['--quiet', 'stats', str(src), '--format', 'yaml'])

        assert result.exit_code == 0
        assert yaml.safe_load(result.output)['total_length'] == 12

    def test_stats_empty(self, runner, write_text):
        """Test stats on an empty file."""
        src = write_text("empty.fq", "")

        result = runner.invoke(main, ['stats', str(src)])

        assert result.exit_code == 0
        assert 'No records' in result.output


class TestConfigCLI:
    """Test configuration commands."""

    def test_config_init_command(self, runner):
        """Test config init command."""
        with runner.isolated_filesystem():
            result = runner.invoke(main, ['config', 'init', '--output', 'test_config.yaml'])

            assert result.exit_code == 0
            with open('test_config.yaml') as f:
                assert 'io' in yaml.safe_load(f)

    def test_config_show(self, runner, tmp_path):
        """Test showing the merged configuration."""
        config = tmp_path / "c.yaml"
        config.write_text("io:\n  fasta_line_width: 70\n")

        result = runner.invoke(main, ['config', 'show', str(config)])

        assert result.exit_code == 0
        assert yaml.safe_load(result.output)['io']['fasta_line_width'] == 70

    def test_invalid_config_rejected(self, runner, tmp_path):
        """Test that an invalid config stops the run."""
        config = tmp_path / "c.yaml"
        config.write_text("io:\n  gzip_compresslevel: 99\n")

        result = runner.invoke(main, ['--config', str(config), 'formats'])

        assert result.exit_code == 1

# StrandIO v0.1.0
# Any usage is subject to this software's license.
