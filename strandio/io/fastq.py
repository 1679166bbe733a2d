#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandIO v0.1.0

FASTQ reader and writer.

FASTQ stores each record on exactly four lines:
1. Header line starting with '@' followed by the record name
2. Sequence line
3. Separator line ('+', optionally repeating the name)
4. Quality line (ASCII-encoded Phred scores, same length as the sequence)

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from typing import Optional, TextIO

from .base import TextSeqReader, TextSeqWriter, strip_line_terminator
from .errors import MissingQuality, TruncatedRecord
from .formats import LogicalFormat
from .record import Record

logger = logging.getLogger(__name__)

FASTQ_MARKER = '@'
FASTQ_SEPARATOR = '+'
LINES_PER_RECORD = 4


class FastqReader(TextSeqReader):
    """
    Fixed four-line-cycle FASTQ parser.

    Args:
        handle: Text stream positioned at the start of a record
        strict: Raise TruncatedRecord when the stream ends partway through a
            record; when False the partial record is logged and dropped

    Example:
        >>> import io
        >>> reader = FastqReader(io.StringIO("@r1\\nACGT\\n+\\nIIII\\n"))
        >>> reader.next()
        Record(name='r1', length=4, quality=yes)
        >>> reader.next() is None
        True
    """

    format = LogicalFormat.FASTQ

    def __init__(self, handle: TextIO, strict: bool = True):
        super().__init__(handle)
        self.strict = strict
        self._exhausted = False

    def next(self) -> Optional[Record]:
        if self._exhausted:
            return None

        header = self._readline()
        if not header:
            self._exhausted = True
            return None
        start_line = self._line_number

        lines = [header]
        while len(lines) < LINES_PER_RECORD:
            line = self._readline()
            if not line:
                break
            lines.append(line)

        if len(lines) < LINES_PER_RECORD:
            self._exhausted = True
            message = (f"FASTQ record starting at line {start_line} has only "
                       f"{len(lines)} of {LINES_PER_RECORD} lines")
            if self.strict:
                raise TruncatedRecord(message, line_number=start_line)
            logger.warning(f"{message}; dropping it")
            return None

        name, sequence, _, quality = (strip_line_terminator(line) for line in lines)
        if name.startswith(FASTQ_MARKER):
            name = name[len(FASTQ_MARKER):]

        return Record(name=name, sequence=sequence, quality=quality)


class FastqWriter(TextSeqWriter):
    """Writes records as '@name', sequence, '+', quality lines."""

    format = LogicalFormat.FASTQ

    def _write_record(self, record: Record):
        if record.quality is None:
            raise MissingQuality(record.name, "FASTQ")
        self._handle.write(
            f"{FASTQ_MARKER}{record.name}\n{record.sequence}\n{FASTQ_SEPARATOR}\n{record.quality}\n"
        )


# StrandIO v0.1.0
# Any usage is subject to this software's license.
