"""
StrandIO v0.1.0

Sequence statistics used by the ``stats`` command.
"""

from typing import Dict, Iterable, List, Tuple

from ..io.record import Record


def calculate_gc_content(sequence: str) -> float:
    """
    Calculate GC content of a DNA sequence.

    Args:
        sequence: DNA sequence string

    Returns:
        GC content as fraction (0.0 to 1.0)

    Example:
        >>> calculate_gc_content("ATGC")
        0.5
    """
    if not sequence:
        return 0.0

    sequence = sequence.upper()
    gc_count = sequence.count('G') + sequence.count('C')

    return gc_count / len(sequence)


def calculate_n50(lengths: Iterable[int]) -> Tuple[int, int]:
    """
    Calculate N50 and L50 of a set of sequence lengths.

    Args:
        lengths: Sequence lengths

    Returns:
        (n50, l50); (0, 0) for no lengths

    Example:
        >>> calculate_n50([2, 3, 4, 5, 6])
        (5, 2)
    """
    sorted_lengths = sorted(lengths, reverse=True)
    half_length = sum(sorted_lengths) / 2

    cumulative = 0
    for i, length in enumerate(sorted_lengths, 1):
        cumulative += length
        if cumulative >= half_length:
            return length, i

    return 0, 0


def summarize_records(records: Iterable[Record]) -> Dict[str, float]:
    """
    Summarize an iterable of records.

    Args:
        records: Records to summarize (consumed)

    Returns:
        Dictionary with statistics, empty if there were no records
    """
    lengths: List[int] = []
    gc_contents: List[float] = []

    for record in records:
        lengths.append(len(record.sequence))
        gc_contents.append(calculate_gc_content(record.sequence))

    if not lengths:
        return {}

    total_length = sum(lengths)
    n50, l50 = calculate_n50(lengths)

    return {
        'num_records': len(lengths),
        'total_length': total_length,
        'mean_length': total_length / len(lengths),
        'min_length': min(lengths),
        'max_length': max(lengths),
        'n50': n50,
        'l50': l50,
        'mean_gc_content': sum(gc_contents) / len(gc_contents),
    }


__all__ = [
    'calculate_gc_content',
    'calculate_n50',
    'summarize_records',
]
