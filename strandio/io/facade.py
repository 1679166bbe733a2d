#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandIO v0.1.0

Reader/writer facade: choose a concrete reader or writer from a file path
and expose every format through one interface.

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
import os
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Union

from .alignment import AlignmentReader, AlignmentWriter
from .base import SeqReader, SeqWriter
from .errors import UnimplementedFormat, WriterConfigurationError
from .fasta import FastaReader, FastaWriter
from .fastq import FastqReader, FastqWriter
from .formats import GZIP_EXTENSION, Compression, LogicalFormat, resolve
from .record import Record
from .streams import DEFAULT_COMPRESSLEVEL, open_stream

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ============================================================================
#                               READER
# ============================================================================

def _build_reader(filepath: Path, fmt: LogicalFormat, compression: Compression,
                  strict_fastq: bool) -> SeqReader:
    """Construct the concrete reader for a resolved format."""
    if fmt == LogicalFormat.FASTQ:
        return FastqReader(open_stream(filepath, 'r', compression), strict=strict_fastq)
    if fmt == LogicalFormat.FASTA:
        return FastaReader(open_stream(filepath, 'r', compression))
    if fmt == LogicalFormat.BAM:
        return AlignmentReader(filepath)
    raise UnimplementedFormat(fmt, 'reading')


class DnaReader:
    """
    Format-independent record reader.

    Yields Records lazily, one pass only; iteration ends on the first None
    from the underlying reader. Use as a context manager so the file is
    closed when the block ends.

    Examples:
        >>> with DnaReader.from_path("reads.fq.gz") as reader:
        ...     for record in reader:
        ...         print(record.name, len(record))
    """

    def __init__(self, reader: SeqReader, filepath: Optional[PathLike] = None,
                 compression: Compression = Compression.UNCOMPRESSED):
        self._reader = reader
        self.filepath = Path(filepath) if filepath is not None else None
        self.compression = compression

    @classmethod
    def from_path(cls, filepath: PathLike, strict_fastq: bool = True) -> 'DnaReader':
        """
        Open a sequence file, picking the reader from its extension.

        Args:
            filepath: Path to a FASTA, FASTQ (optionally .gz) or BAM file
            strict_fastq: Raise on a truncated final FASTQ record

        Returns:
            DnaReader

        Raises:
            FormatResolutionError: If the extension is missing or unsupported
            UnimplementedFormat: For SAM, CRAM and 2bit files
            OSError: If the file cannot be opened
        """
        filepath = Path(filepath)
        fmt, compression = resolve(filepath)
        reader = _build_reader(filepath, fmt, compression, strict_fastq)
        logger.info(f"Reading {fmt.value} records from {filepath}")
        return cls(reader, filepath, compression)

    @property
    def format(self) -> LogicalFormat:
        """Logical format of the records produced."""
        return self._reader.format

    @property
    def extension(self) -> str:
        """Canonical extension of the produced format, e.g. 'fastq'."""
        return self._reader.format.extension

    def header(self) -> Optional[Any]:
        """Alignment header for BAM input; None for FASTA/FASTQ."""
        return self._reader.header()

    def next(self) -> Optional[Record]:
        """Return the next Record, or None once the file is exhausted."""
        return self._reader.next()

    def close(self):
        self._reader.close()

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        record = self._reader.next()
        if record is None:
            raise StopIteration
        return record

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"DnaReader(path={self.filepath}, format={self.format.value})"


# ============================================================================
#                               WRITER
# ============================================================================

def _compression_from_suffix(filepath: Path) -> Compression:
    """gzip if the last suffix is '.gz', otherwise uncompressed."""
    if filepath.suffix.lower().lstrip('.') == GZIP_EXTENSION:
        return Compression.GZIPPED
    return Compression.UNCOMPRESSED


def _build_text_writer(filepath: Path, fmt: LogicalFormat, compression: Compression,
                       fasta_line_width: int, compresslevel: int) -> SeqWriter:
    """Construct a FASTA or FASTQ writer."""
    if fmt == LogicalFormat.FASTQ:
        return FastqWriter(open_stream(filepath, 'w', compression, compresslevel))
    if fmt == LogicalFormat.FASTA:
        # Validate before the file is created
        if fasta_line_width < 0:
            raise ValueError(f"fasta_line_width must be >= 0, got {fasta_line_width}")
        return FastaWriter(open_stream(filepath, 'w', compression, compresslevel),
                           line_width=fasta_line_width)
    raise UnimplementedFormat(fmt, 'writing')


class DnaWriter:
    """
    Format-independent record writer.

    Closing (or leaving a ``with`` block) flushes and closes the file.

    Examples:
        >>> with DnaReader.from_path("in.bam") as reader:
        ...     with DnaWriter.from_reader("copy.bam", reader) as writer:
        ...         writer.write_all(reader)
    """

    def __init__(self, writer: SeqWriter, filepath: Optional[PathLike] = None):
        self._writer = writer
        self.filepath = Path(filepath) if filepath is not None else None

    @classmethod
    def from_reader(cls, filepath: PathLike, reader: DnaReader,
                    fasta_line_width: int = 0,
                    compresslevel: int = DEFAULT_COMPRESSLEVEL) -> 'DnaWriter':
        """
        Create a writer in the same format as a source reader.

        The format comes from the reader, not from ``filepath``; a trailing
        '.gz' on ``filepath`` still selects gzip output for FASTA/FASTQ. For
        BAM the reader's header is copied into the output.

        Args:
            filepath: Output path
            reader: Source reader
            fasta_line_width: Bases per FASTA line (0 = single line)
            compresslevel: gzip level for compressed text output

        Raises:
            UnimplementedFormat: If the source format cannot be written
        """
        filepath = Path(filepath)
        fmt = reader.format

        if fmt == LogicalFormat.BAM:
            writer = AlignmentWriter(filepath, reader.header())
        else:
            writer = _build_text_writer(filepath, fmt, _compression_from_suffix(filepath),
                                        fasta_line_width, compresslevel)

        logger.info(f"Writing {fmt.value} records to {filepath}")
        return cls(writer, filepath)

    @classmethod
    def from_path(cls, filepath: PathLike, fasta_line_width: int = 0,
                  compresslevel: int = DEFAULT_COMPRESSLEVEL) -> 'DnaWriter':
        """
        Create a writer whose format is resolved from ``filepath``.

        Raises:
            FormatResolutionError: If the extension is missing or unsupported
            WriterConfigurationError: For alignment formats, which need a
                donor header (use ``from_reader``)
            UnimplementedFormat: For 2bit output
        """
        filepath = Path(filepath)
        fmt, compression = resolve(filepath)

        if fmt.is_alignment:
            raise WriterConfigurationError(
                f"Cannot write {fmt.value} file {filepath} without a donor header; "
                f"use DnaWriter.from_reader with an alignment reader"
            )

        writer = _build_text_writer(filepath, fmt, compression, fasta_line_width, compresslevel)
        logger.info(f"Writing {fmt.value} records to {filepath}")
        return cls(writer, filepath)

    @property
    def format(self) -> LogicalFormat:
        return self._writer.format

    @property
    def records_written(self) -> int:
        return self._writer.records_written

    def write(self, record: Record):
        """
        Write one record.

        Raises:
            MissingQuality: If FASTQ/BAM output gets a record without quality
        """
        self._writer.write(record)

    def write_all(self, records: Iterable[Record]) -> int:
        """Write every record; returns the number written."""
        return self._writer.write_all(records)

    def close(self):
        self._writer.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"DnaWriter(path={self.filepath}, format={self.format.value})"


# ============================================================================
#                          CONVENIENCE FUNCTIONS
# ============================================================================

def _drain(reader: DnaReader) -> Iterator[Record]:
    with reader:
        yield from reader


def _same_file(source: PathLike, destination: PathLike) -> bool:
    """True if both paths name one file (symlinks and hard links included)."""
    source, destination = Path(source), Path(destination)
    if source.resolve() == destination.resolve():
        return True
    return source.exists() and destination.exists() and os.path.samefile(source, destination)


def read_records(filepath: PathLike, strict_fastq: bool = True) -> Iterator[Record]:
    """
    Iterate over the records of a file.

    The reader is built immediately, so resolution errors surface at the call
    rather than on first iteration. The file is closed when the iterator is
    exhausted or closed.

    Args:
        filepath: Input path
        strict_fastq: Raise on a truncated final FASTQ record

    Returns:
        Iterator of Records
    """
    return _drain(DnaReader.from_path(filepath, strict_fastq=strict_fastq))


def transcode(
    source: PathLike,
    destination: PathLike,
    fasta_line_width: int = 0,
    compresslevel: int = DEFAULT_COMPRESSLEVEL,
    strict_fastq: bool = True
) -> int:
    """
    Copy every record from one file to another, converting format if needed.

    When the destination resolves to the source's format the writer is derived
    from the reader (so BAM headers carry over); otherwise the destination
    path alone decides the output format.

    Args:
        source: Input path
        destination: Output path
        fasta_line_width: Bases per FASTA line (0 = single line)
        compresslevel: gzip level for compressed text output
        strict_fastq: Raise on a truncated final FASTQ record

    Returns:
        Number of records written

    Raises:
        FormatResolutionError: If either path cannot be resolved
        WriterConfigurationError: If converting a text format into BAM, or if
            destination and source are the same file
        MissingQuality: If FASTQ/BAM output gets a record without quality
    """
    target_format, _ = resolve(destination)

    if _same_file(source, destination):
        raise WriterConfigurationError(
            f"Refusing to transcode {source} onto itself; the output would truncate the input"
        )

    with DnaReader.from_path(source, strict_fastq=strict_fastq) as reader:
        if target_format == reader.format:
            writer = DnaWriter.from_reader(destination, reader, fasta_line_width, compresslevel)
        else:
            writer = DnaWriter.from_path(destination, fasta_line_width, compresslevel)

        with writer:
            count = writer.write_all(reader)

    logger.info(f"Transcoded {count} records: {source} → {destination}")
    return count


def count_records(filepath: PathLike, strict_fastq: bool = True) -> int:
    """
    Count the records in a file.

    Args:
        filepath: Input path
        strict_fastq: Raise on a truncated final FASTQ record

    Returns:
        Number of records
    """
    return sum(1 for _ in read_records(filepath, strict_fastq=strict_fastq))


# StrandIO v0.1.0
# Any usage is subject to this software's license.
