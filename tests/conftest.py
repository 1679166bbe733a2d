#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandIO v0.1.0

Pytest configuration and shared fixtures.

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import gzip

import pytest


@pytest.fixture
def simple_fasta():
    """Two-record FASTA with a sequence spread over two lines."""
    return ">a\nACGT\nTTTT\n>b\nGGGG\n"


@pytest.fixture
def simple_fastq():
    """Generate simple FASTQ reads for testing."""
    return """@read1
ATCGATCGATCG
+
IIIIIIIIIIII
@read2
GCTAGCTAGCTA
+
IIIIIIIIIIII
"""


@pytest.fixture
def write_text(tmp_path):
    """Write text to a file under tmp_path, gzip-compressed for '.gz' names."""
    def _write(name, content):
        path = tmp_path / name
        if name.endswith('.gz'):
            with gzip.open(path, 'wt') as f:
                f.write(content)
        else:
            path.write_text(content)
        return path
    return _write


@pytest.fixture
def bam_file(tmp_path):
    """Small unaligned BAM with two reads carrying qualities."""
    pysam = pytest.importorskip("pysam")

    path = tmp_path / "reads.bam"
    header = {'HD': {'VN': '1.0'}, 'SQ': [{'LN': 1000, 'SN': 'chr1'}]}

    with pysam.AlignmentFile(str(path), 'wb', header=header) as bam:
        for name, seq, qual in [("r1", "ACGTACGT", "IIIIHHHH"), ("r2", "GGGCCC", "######")]:
            segment = pysam.AlignedSegment(bam.header)
            segment.query_name = name
            segment.query_sequence = seq
            segment.flag = 4
            segment.reference_id = -1
            segment.reference_start = -1
            segment.mapping_quality = 0
            segment.query_qualities = pysam.qualitystring_to_array(qual)
            bam.write(segment)

    return path

# StrandIO v0.1.0
# Any usage is subject to this software's license.
