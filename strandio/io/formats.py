#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandIO v0.1.0

Format resolver: maps a file name's suffix chain to a logical format and a
compression mode.

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Tuple, Union

from .errors import MissingExtension, UnsupportedCompressedFormat, UnsupportedFormat

logger = logging.getLogger(__name__)


class LogicalFormat(str, Enum):
    """Record grammar of a file, independent of its compression."""
    FASTQ = 'fastq'
    FASTA = 'fasta'
    SAM = 'sam'
    BAM = 'bam'
    CRAM = 'cram'
    TWOBIT = '2bit'

    @property
    def extension(self) -> str:
        """Canonical file extension (without the leading dot)."""
        return self.value

    @property
    def is_alignment(self) -> bool:
        """True for SAM/BAM/CRAM."""
        return self in (LogicalFormat.SAM, LogicalFormat.BAM, LogicalFormat.CRAM)


class Compression(str, Enum):
    """Byte-level compression of a file."""
    GZIPPED = 'gzip'
    UNCOMPRESSED = 'none'


GZIP_EXTENSION = 'gz'

EXTENSION_TO_FORMAT: Dict[str, LogicalFormat] = {
    'fastq': LogicalFormat.FASTQ,
    'fq': LogicalFormat.FASTQ,
    'fasta': LogicalFormat.FASTA,
    'fa': LogicalFormat.FASTA,
    'sam': LogicalFormat.SAM,
    'bam': LogicalFormat.BAM,
    'cram': LogicalFormat.CRAM,
    '2bit': LogicalFormat.TWOBIT,
}

# Only the text formats may sit inside a generic gzip wrapper
GZIP_WRAPPABLE = ('fastq', 'fq', 'fasta', 'fa')

# BAM and CRAM carry their own block compression
CONTAINER_COMPRESSED = (LogicalFormat.BAM, LogicalFormat.CRAM)

# Formats with a working reader/writer
READABLE_FORMATS = (LogicalFormat.FASTQ, LogicalFormat.FASTA, LogicalFormat.BAM)
WRITABLE_FORMATS = (LogicalFormat.FASTQ, LogicalFormat.FASTA, LogicalFormat.BAM)


def resolve(path: Union[str, Path]) -> Tuple[LogicalFormat, Compression]:
    """
    Resolve the logical format and compression of a file from its name.

    Only the final path component is inspected, so dots in directory names
    do not matter. Suffixes are matched case-insensitively.

    Args:
        path: File path

    Returns:
        (LogicalFormat, Compression) tuple

    Raises:
        MissingExtension: If the file name has no dot-separated suffix
        UnsupportedCompressedFormat: If '.gz' wraps anything but FASTA/FASTQ
        UnsupportedFormat: If the final suffix is not recognized

    Examples:
        >>> resolve("reads.fq.gz")
        (<LogicalFormat.FASTQ: 'fastq'>, <Compression.GZIPPED: 'gzip'>)
        >>> resolve("aln.bam")
        (<LogicalFormat.BAM: 'bam'>, <Compression.GZIPPED: 'gzip'>)
    """
    path_str = str(path)
    segments = Path(path_str).name.split('.')

    if len(segments) < 2:
        raise MissingExtension(path_str)

    last = segments[-1].lower()

    if last == GZIP_EXTENSION:
        inner = segments[-2].lower()
        if inner not in GZIP_WRAPPABLE:
            raise UnsupportedCompressedFormat(path_str, segments[-2], segments[-1])
        fmt, compression = EXTENSION_TO_FORMAT[inner], Compression.GZIPPED
    elif last in EXTENSION_TO_FORMAT:
        fmt = EXTENSION_TO_FORMAT[last]
        compression = Compression.GZIPPED if fmt in CONTAINER_COMPRESSED else Compression.UNCOMPRESSED
    else:
        raise UnsupportedFormat(path_str, segments[-1])

    logger.debug(f"Resolved {path_str} → format={fmt.value}, compression={compression.value}")
    return fmt, compression


def describe_extensions() -> Dict[str, Dict[str, object]]:
    """
    Describe every recognized suffix.

    Returns:
        Mapping of suffix to a dict with 'format', 'gzip', 'read' and 'write'
    """
    table = {}
    for ext, fmt in EXTENSION_TO_FORMAT.items():
        table[ext] = {
            'format': fmt.value,
            'gzip': ext in GZIP_WRAPPABLE,
            'read': fmt in READABLE_FORMATS,
            'write': fmt in WRITABLE_FORMATS,
        }
    return table


# StrandIO v0.1.0
# Any usage is subject to this software's license.
