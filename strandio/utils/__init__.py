"""
Utilities module for StrandIO.

- Sequence statistics (GC content, N50, record summaries)
"""

from .sequence_utils import calculate_gc_content, calculate_n50, summarize_records

__all__ = [
    "calculate_gc_content",
    "calculate_n50",
    "summarize_records",
]
