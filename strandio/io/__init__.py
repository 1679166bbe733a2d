"""
Sequence-record I/O for StrandIO.

Reads FASTA, FASTQ (plain or gzipped) and BAM files into uniform Records and
writes them back out in the same or a different format.

MODULES:
- record.py: Record data model
- errors.py: Exception hierarchy
- formats.py: LogicalFormat/Compression and the path resolver
- streams.py: gzip-aware stream adapter
- fasta.py / fastq.py: hand-written text parsers and writers
- alignment.py: pysam-backed BAM bridge
- facade.py: DnaReader/DnaWriter and convenience functions
"""

from .record import Record
from .errors import (
    SeqIOError,
    FormatResolutionError,
    MissingExtension,
    UnsupportedFormat,
    UnsupportedCompressedFormat,
    UnimplementedFormat,
    WriterConfigurationError,
    RecordParseError,
    MalformedInput,
    TruncatedRecord,
    MissingQuality,
    NoMoreRecords,
)
from .formats import (
    LogicalFormat,
    Compression,
    resolve,
    describe_extensions,
)
from .streams import open_stream
from .base import SeqReader, SeqWriter
from .fasta import FastaReader, FastaWriter, FastaState
from .fastq import FastqReader, FastqWriter
from .alignment import AlignmentReader, AlignmentWriter
from .facade import (
    DnaReader,
    DnaWriter,
    read_records,
    transcode,
    count_records,
)

__all__ = [
    # Data model
    "Record",

    # Errors
    "SeqIOError",
    "FormatResolutionError",
    "MissingExtension",
    "UnsupportedFormat",
    "UnsupportedCompressedFormat",
    "UnimplementedFormat",
    "WriterConfigurationError",
    "RecordParseError",
    "MalformedInput",
    "TruncatedRecord",
    "MissingQuality",
    "NoMoreRecords",

    # Format resolution
    "LogicalFormat",
    "Compression",
    "resolve",
    "describe_extensions",
    "open_stream",

    # Concrete readers/writers
    "SeqReader",
    "SeqWriter",
    "FastaReader",
    "FastaWriter",
    "FastaState",
    "FastqReader",
    "FastqWriter",
    "AlignmentReader",
    "AlignmentWriter",

    # Facade
    "DnaReader",
    "DnaWriter",
    "read_records",
    "transcode",
    "count_records",
]
