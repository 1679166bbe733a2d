#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandIO v0.1.0

Abstract reader and writer interfaces shared by every format.

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Optional, TextIO

from .formats import LogicalFormat
from .record import Record

logger = logging.getLogger(__name__)


def strip_line_terminator(line: str) -> str:
    """Remove a trailing '\\n' or '\\r\\n' from a line read from a stream."""
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line


class SeqReader(ABC):
    """
    Forward-only source of Records.

    Subclasses implement ``next()``, returning None once the stream is
    exhausted. Iteration stops on the first None and cannot be restarted.
    """

    format: LogicalFormat = None

    @abstractmethod
    def next(self) -> Optional[Record]:
        """Return the next record, or None at the end of the stream."""
        ...

    def header(self) -> Optional[Any]:
        """Alignment header metadata; None for text formats."""
        return None

    @abstractmethod
    def close(self):
        """Release the underlying stream."""
        ...

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        record = self.next()
        if record is None:
            raise StopIteration
        return record

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class TextSeqReader(SeqReader):
    """Reader over a line-oriented text stream; tracks line numbers."""

    def __init__(self, handle: TextIO):
        self._handle = handle
        self._line_number = 0
        self._closed = False

    def _readline(self) -> str:
        """Read one line; '' means end of stream."""
        line = self._handle.readline()
        if line:
            self._line_number += 1
        return line

    @property
    def line_number(self) -> int:
        """Number of lines consumed so far."""
        return self._line_number

    def close(self):
        """Close the underlying stream (idempotent)."""
        if not self._closed:
            self._handle.close()
            self._closed = True
            logger.debug(f"Closed {self.format.value} reader after {self._line_number} lines")


class SeqWriter(ABC):
    """Sink for Records. Closing flushes and releases the stream."""

    format: LogicalFormat = None

    def __init__(self):
        self.records_written = 0
        self._closed = False

    @abstractmethod
    def _write_record(self, record: Record):
        """Serialize one record."""
        ...

    @abstractmethod
    def _close_stream(self):
        """Flush and close the underlying stream."""
        ...

    def write(self, record: Record):
        """
        Write a single record.

        Args:
            record: Record to serialize

        Raises:
            ValueError: If the writer has been closed
        """
        if self._closed:
            raise ValueError(f"Cannot write to a closed {self.format.value} writer")
        self._write_record(record)
        self.records_written += 1

    def write_all(self, records: Iterable[Record]) -> int:
        """
        Write every record from an iterable.

        Returns:
            Number of records written by this call
        """
        count = 0
        for record in records:
            self.write(record)
            count += 1
        return count

    def close(self):
        """Flush and close (idempotent)."""
        if self._closed:
            return
        self._close_stream()
        self._closed = True
        logger.info(f"Wrote {self.records_written} {self.format.value} records")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class TextSeqWriter(SeqWriter):
    """Writer over a text stream."""

    def __init__(self, handle: TextIO):
        super().__init__()
        self._handle = handle

    def _close_stream(self):
        self._handle.flush()
        self._handle.close()


# StrandIO v0.1.0
# Any usage is subject to this software's license.
