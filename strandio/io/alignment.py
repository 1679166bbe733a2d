#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandIO v0.1.0

Alignment-format bridge backed by pysam.

BAM parsing, BGZF block compression and header handling all live in pysam.
This module narrows pysam down to the handful of calls the reader/writer
facade needs: open for reading, read the next record, open for writing with a
donor header, write a record, close.

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import pysam

from .base import SeqReader, SeqWriter
from .errors import MissingQuality, NoMoreRecords
from .formats import LogicalFormat
from .record import Record

logger = logging.getLogger(__name__)

UNMAPPED_FLAG = 4


# ============================================================================
#                           PYSAM BRIDGE
# ============================================================================

def open_for_read(filepath: Union[str, Path]) -> pysam.AlignmentFile:
    """Open a BAM file for sequential reading (unaligned BAMs allowed)."""
    logger.debug(f"Opening BAM for reading: {filepath}")
    return pysam.AlignmentFile(str(filepath), 'rb', check_sq=False)


def read_next(handle: pysam.AlignmentFile) -> Record:
    """
    Read the next alignment as a Record.

    Raises:
        NoMoreRecords: When the file has no more alignments
    """
    try:
        segment = next(handle)
    except StopIteration:
        raise NoMoreRecords(f"No more records in {handle.filename!r}") from None
    return segment_to_record(segment)


def open_for_write(filepath: Union[str, Path], donor_header: Any) -> pysam.AlignmentFile:
    """
    Open a BAM file for writing.

    Args:
        filepath: Output path
        donor_header: pysam.AlignmentHeader or header dict copied into the output
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Opening BAM for writing: {filepath}")
    return pysam.AlignmentFile(str(filepath), 'wb', header=donor_header)


def write_record(handle: pysam.AlignmentFile, record: Record):
    """
    Write a Record as an unmapped alignment.

    Raises:
        MissingQuality: If the record has no quality string
    """
    if record.quality is None:
        raise MissingQuality(record.name, "BAM")
    handle.write(record_to_segment(record, handle.header))


def segment_to_record(segment: pysam.AlignedSegment) -> Record:
    """Convert a pysam AlignedSegment into a Record."""
    qualities = segment.query_qualities
    quality = pysam.array_to_qualitystring(qualities) if qualities is not None else None
    return Record(
        name=segment.query_name or '',
        sequence=segment.query_sequence or '',
        quality=quality,
    )


def record_to_segment(record: Record, header: Any) -> pysam.AlignedSegment:
    """Convert a Record into an unmapped pysam AlignedSegment."""
    segment = pysam.AlignedSegment(header)
    segment.query_name = record.name
    segment.query_sequence = record.sequence
    segment.flag = UNMAPPED_FLAG
    segment.reference_id = -1
    segment.reference_start = -1
    segment.mapping_quality = 0
    if record.quality is not None:
        segment.query_qualities = pysam.qualitystring_to_array(record.quality)
    return segment


# ============================================================================
#                       READER / WRITER
# ============================================================================

class AlignmentReader(SeqReader):
    """
    Reads BAM files through pysam.

    Args:
        filepath: Path to a BAM file
    """

    format = LogicalFormat.BAM

    def __init__(self, filepath: Union[str, Path]):
        self.filepath = Path(filepath)
        self._handle = open_for_read(self.filepath)
        self._exhausted = False
        self._closed = False

    def next(self) -> Optional[Record]:
        if self._exhausted:
            return None
        try:
            return read_next(self._handle)
        except NoMoreRecords:
            self._exhausted = True
            return None

    def header(self) -> pysam.AlignmentHeader:
        """Header of the BAM file, usable as a donor for an AlignmentWriter."""
        return self._handle.header

    def close(self):
        if not self._closed:
            self._handle.close()
            self._closed = True
            logger.debug(f"Closed BAM reader: {self.filepath}")


class AlignmentWriter(SeqWriter):
    """
    Writes Records to BAM through pysam, copying a donor header.

    Args:
        filepath: Output BAM path
        donor_header: Header taken from the source AlignmentReader
    """

    format = LogicalFormat.BAM

    def __init__(self, filepath: Union[str, Path], donor_header: Any):
        super().__init__()
        self.filepath = Path(filepath)
        self._handle = open_for_write(self.filepath, donor_header)

    def _write_record(self, record: Record):
        write_record(self._handle, record)

    def _close_stream(self):
        self._handle.close()


# StrandIO v0.1.0
# Any usage is subject to this software's license.
