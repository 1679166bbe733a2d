#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandIO v0.1.0

FASTA reader and writer.

A FASTA record is a '>' header line followed by any number of sequence lines.
The only way to know a record's sequence has ended is to read the next header
(or reach the end of the stream), so the reader carries that header over to
the following call.

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from enum import Enum
from typing import List, Optional, TextIO

from .base import TextSeqReader, TextSeqWriter, strip_line_terminator
from .errors import MalformedInput
from .formats import LogicalFormat
from .record import Record

logger = logging.getLogger(__name__)

FASTA_MARKER = '>'


class FastaState(Enum):
    """Lookahead state of a FastaReader between calls."""
    START = 'start'
    HAVE_HEADER = 'have_header'
    EXHAUSTED = 'exhausted'


class FastaReader(TextSeqReader):
    """
    Multi-line FASTA parser with one-header lookahead.

    States:
        START: nothing consumed yet
        HAVE_HEADER: the next record's header was read while scanning the
            previous record's body and is held in ``pending_header``
        EXHAUSTED: the stream has ended and no header is pending

    Example:
        >>> import io
        >>> reader = FastaReader(io.StringIO(">a\\nACGT\\nTTTT\\n>b\\nGGGG\\n"))
        >>> [(r.name, r.sequence) for r in reader]
        [('a', 'ACGTTTTT'), ('b', 'GGGG')]
    """

    format = LogicalFormat.FASTA

    def __init__(self, handle: TextIO):
        super().__init__(handle)
        self.state = FastaState.START
        self.pending_header: Optional[str] = None

    def _read_first_header(self) -> Optional[str]:
        """Read the opening header line; None for an empty stream."""
        line = self._readline()
        if not line:
            return None
        if not line.startswith(FASTA_MARKER):
            raise MalformedInput(
                f"Not FASTA format: first line must start with '{FASTA_MARKER}'",
                line_number=self._line_number
            )
        return strip_line_terminator(line)[len(FASTA_MARKER):]

    def next(self) -> Optional[Record]:
        if self.state is FastaState.EXHAUSTED:
            return None

        if self.state is FastaState.START:
            name = self._read_first_header()
            if name is None:
                self.state = FastaState.EXHAUSTED
                return None
        else:
            name = self.pending_header

        chunks: List[str] = []
        next_header = None
        while True:
            line = self._readline()
            if not line:
                break
            if line.startswith(FASTA_MARKER):
                next_header = strip_line_terminator(line)[len(FASTA_MARKER):]
                break
            chunks.append(strip_line_terminator(line))

        if next_header is None:
            self.state = FastaState.EXHAUSTED
        else:
            self.state = FastaState.HAVE_HEADER
        self.pending_header = next_header

        return Record(name=name, sequence=''.join(chunks))


class FastaWriter(TextSeqWriter):
    """
    Writes records as '>name' followed by the sequence.

    Args:
        handle: Text stream to write to
        line_width: Bases per sequence line; 0 keeps each sequence on one line
    """

    format = LogicalFormat.FASTA

    def __init__(self, handle: TextIO, line_width: int = 0):
        super().__init__(handle)
        if line_width < 0:
            raise ValueError(f"line_width must be >= 0, got {line_width}")
        self.line_width = line_width

    def _write_record(self, record: Record):
        self._handle.write(f"{FASTA_MARKER}{record.name}\n")

        sequence = record.sequence
        if self.line_width > 0 and len(sequence) > self.line_width:
            for i in range(0, len(sequence), self.line_width):
                self._handle.write(sequence[i:i + self.line_width] + '\n')
        else:
            self._handle.write(sequence + '\n')


# StrandIO v0.1.0
# Any usage is subject to this software's license.
