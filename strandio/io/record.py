#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandIO v0.1.0

Record data model shared by every reader and writer.

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass
from typing import Optional

from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

PHRED_OFFSET = 33


@dataclass(frozen=True)
class Record:
    """
    One sequence record, independent of the file format it came from.

    Attributes:
        name: Record identifier with the format marker ('>' or '@') removed;
            writers add the marker back, so '@r1' on disk is name 'r1' here
        sequence: Residues with all line breaks removed
        quality: Per-base quality string (Phred+33), None for FASTA

    Writers expect ``len(quality) == len(sequence)`` when quality is present;
    readers do not check it.

    Example:
        >>> rec = Record(name='r1', sequence='ACGT', quality='IIII')
        >>> len(rec)
        4
    """
    name: str
    sequence: str
    quality: Optional[str] = None

    @property
    def has_quality(self) -> bool:
        """Whether this record carries a quality string."""
        return self.quality is not None

    def to_seqrecord(self) -> SeqRecord:
        """
        Convert to a Biopython SeqRecord.

        Quality characters become ``phred_quality`` letter annotations.

        Returns:
            SeqRecord with id and name set to this record's name
        """
        letter_annotations = None
        if self.quality is not None:
            letter_annotations = {
                "phred_quality": [ord(c) - PHRED_OFFSET for c in self.quality]
            }
        return SeqRecord(
            seq=Seq(self.sequence),
            id=self.name,
            name=self.name,
            description="",
            letter_annotations=letter_annotations,
        )

    @classmethod
    def from_seqrecord(cls, seq_record: SeqRecord) -> 'Record':
        """
        Build a Record from a Biopython SeqRecord.

        Args:
            seq_record: Source record; ``phred_quality`` is used when present

        Returns:
            New Record
        """
        scores = seq_record.letter_annotations.get("phred_quality")
        quality = None
        if scores is not None:
            quality = "".join(chr(q + PHRED_OFFSET) for q in scores)
        return cls(name=seq_record.id, sequence=str(seq_record.seq), quality=quality)

    def __len__(self) -> int:
        """Length of the sequence."""
        return len(self.sequence)

    def __repr__(self) -> str:
        """String representation."""
        return (f"Record(name='{self.name}', length={len(self.sequence)}, "
                f"quality={'yes' if self.has_quality else 'no'})")


# StrandIO v0.1.0
# Any usage is subject to this software's license.
