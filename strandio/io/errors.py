#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandIO v0.1.0

Exception hierarchy for sequence-record I/O.

Resolution and configuration errors are raised while a reader or writer is
being constructed, so no half-built object is ever returned. Parse errors are
raised from ``next()``/iteration and are never confused with the normal end of
a stream. Errors from the operating system are plain ``OSError`` and are left
untouched.

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Optional


class SeqIOError(Exception):
    """Base class for all strandio errors."""
    pass


# ============================================================================
# Resolution-time errors
# ============================================================================

class FormatResolutionError(SeqIOError, ValueError):
    """Raised when a file path cannot be mapped to a format."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)


class MissingExtension(FormatResolutionError):
    """The file name has no dot-separated suffix."""

    def __init__(self, path: str):
        super().__init__(path, f"File '{path}' has no extension")


class UnsupportedFormat(FormatResolutionError):
    """The final suffix is not a recognized sequence format."""

    def __init__(self, path: str, extension: str):
        self.extension = extension
        super().__init__(path, f"File extension '{extension}' of '{path}' is not accepted")


class UnsupportedCompressedFormat(FormatResolutionError):
    """A gzip suffix wraps something other than FASTA or FASTQ."""

    def __init__(self, path: str, extension: str, compression_extension: str):
        self.extension = extension
        super().__init__(
            path,
            f"File extension '{extension}.{compression_extension}' of '{path}' is not accepted "
            f"(only FASTA and FASTQ may be gzip-wrapped)"
        )


class UnimplementedFormat(SeqIOError, NotImplementedError):
    """The format is recognized but has no reader or writer."""

    def __init__(self, fmt, operation: str):
        self.format = fmt
        self.operation = operation
        name = getattr(fmt, 'value', fmt)
        super().__init__(f"{operation.capitalize()} of '{name}' files is not implemented")


class WriterConfigurationError(SeqIOError, ValueError):
    """A writer cannot be built from the information supplied."""
    pass


# ============================================================================
# Per-record errors
# ============================================================================

class RecordParseError(SeqIOError, ValueError):
    """Raised when a record cannot be parsed from the input stream."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class MalformedInput(RecordParseError):
    """Input does not follow the grammar of its format."""
    pass


class TruncatedRecord(RecordParseError):
    """The stream ended partway through a record."""
    pass


class MissingQuality(SeqIOError, ValueError):
    """A record without quality was handed to a format that needs it."""

    def __init__(self, name: str, fmt: str):
        self.name = name
        super().__init__(f"Record '{name}' has no quality string; {fmt} output requires one")


class NoMoreRecords(SeqIOError):
    """Terminal signal from the alignment bridge: the file has no more reads."""
    pass


# StrandIO v0.1.0
# Any usage is subject to this software's license.
