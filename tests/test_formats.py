#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandIO v0.1.0

Tests for file-name format resolution.

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest

from strandio.io.errors import (
    FormatResolutionError,
    MissingExtension,
    UnsupportedCompressedFormat,
    UnsupportedFormat,
)
from strandio.io.formats import Compression, LogicalFormat, describe_extensions, resolve


class TestPlainExtensions:
    """Test resolution of uncompressed suffixes."""

    @pytest.mark.parametrize("path, expected", [
        ("reads.fastq", LogicalFormat.FASTQ),
        ("reads.fq", LogicalFormat.FASTQ),
        ("genome.fasta", LogicalFormat.FASTA),
        ("genome.fa", LogicalFormat.FASTA),
        ("aln.sam", LogicalFormat.SAM),
        ("ref.2bit", LogicalFormat.TWOBIT),
    ])
    def test_text_and_stub_formats_are_uncompressed(self, path, expected):
        """Test that plain suffixes select the format with no compression."""
        assert resolve(path) == (expected, Compression.UNCOMPRESSED)

    @pytest.mark.parametrize("path, expected", [
        ("aln.bam", LogicalFormat.BAM),
        ("aln.cram", LogicalFormat.CRAM),
    ])
    def test_container_formats_are_compressed(self, path, expected):
        """Test that BAM/CRAM are always treated as compressed containers."""
        assert resolve(path) == (expected, Compression.GZIPPED)

    def test_twobit_mixed_case(self):
        """Test that the '2Bit' spelling resolves too."""
        assert resolve("ref.2Bit")[0] == LogicalFormat.TWOBIT

    def test_only_last_component_is_inspected(self):
        """Test that dots in directory names are ignored."""
        assert resolve("/data/run.v2/sample.fa")[0] == LogicalFormat.FASTA

    def test_multiple_dots_use_final_segment(self):
        """Test that only the final segment picks the format."""
        assert resolve("sample.R1.trimmed.fq") == (LogicalFormat.FASTQ, Compression.UNCOMPRESSED)


class TestGzipExtensions:
    """Test resolution of gzip-wrapped suffixes."""

    @pytest.mark.parametrize("path, expected", [
        ("reads.fastq.gz", LogicalFormat.FASTQ),
        ("reads.fq.gz", LogicalFormat.FASTQ),
        ("genome.fasta.gz", LogicalFormat.FASTA),
        ("genome.fa.gz", LogicalFormat.FASTA),
    ])
    def test_gzipped_text_formats(self, path, expected):
        """Test that .gz selects compression and the preceding suffix the format."""
        assert resolve(path) == (expected, Compression.GZIPPED)

    @pytest.mark.parametrize("path", ["aln.bam.gz", "aln.sam.gz", "aln.cram.gz", "ref.2bit.gz", "notes.txt.gz"])
    def test_gzipped_other_formats_rejected(self, path):
        """Test that only FASTA/FASTQ may be gzip-wrapped."""
        with pytest.raises(UnsupportedCompressedFormat):
            resolve(path)

    def test_bare_gz_rejected(self):
        """Test that 'x.gz' has no recognized inner format."""
        with pytest.raises(UnsupportedCompressedFormat):
            resolve("x.gz")


class TestResolutionErrors:
    """Test resolution failures."""

    def test_missing_extension(self):
        """Test a name without any dot."""
        with pytest.raises(MissingExtension):
            resolve("reads")

    def test_unsupported_extension(self):
        """Test that an unknown suffix fails with UnsupportedFormat."""
        with pytest.raises(UnsupportedFormat) as exc_info:
            resolve("x.xyz")
        assert exc_info.value.extension == "xyz"

    def test_errors_share_base_class(self):
        """Test that every resolution error is a FormatResolutionError and ValueError."""
        for path in ["reads", "x.xyz", "x.bam.gz"]:
            with pytest.raises(FormatResolutionError):
                resolve(path)
            with pytest.raises(ValueError):
                resolve(path)

    def test_resolution_is_idempotent(self):
        """Test that resolving the same path twice gives the same answer."""
        for path in ["a.fq.gz", "b.fa", "c.bam"]:
            assert resolve(path) == resolve(path)


class TestLogicalFormat:
    """Test LogicalFormat helpers."""

    def test_extension(self):
        """Test canonical extensions."""
        assert LogicalFormat.FASTQ.extension == "fastq"
        assert LogicalFormat.FASTA.extension == "fasta"
        assert LogicalFormat.BAM.extension == "bam"

    def test_is_alignment(self):
        """Test alignment format classification."""
        assert LogicalFormat.BAM.is_alignment
        assert LogicalFormat.SAM.is_alignment
        assert LogicalFormat.CRAM.is_alignment
        assert not LogicalFormat.FASTA.is_alignment
        assert not LogicalFormat.TWOBIT.is_alignment

    def test_describe_extensions(self):
        """Test the extension table used by the CLI."""
        table = describe_extensions()
        assert table['fq'] == {'format': 'fastq', 'gzip': True, 'read': True, 'write': True}
        assert table['bam']['gzip'] is False
        assert table['sam']['read'] is False
        assert table['2bit']['write'] is False

# StrandIO v0.1.0
# Any usage is subject to this software's license.
