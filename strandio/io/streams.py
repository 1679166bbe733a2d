#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandIO v0.1.0

Compression stream adapter.

Wraps a file path in a text-mode handle, adding transparent gzip
decompression on read and compression on write.

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import gzip
import logging
from pathlib import Path
from typing import TextIO, Union

from .formats import Compression

logger = logging.getLogger(__name__)

DEFAULT_COMPRESSLEVEL = 6


def open_stream(
    filepath: Union[str, Path],
    mode: str = 'r',
    compression: Compression = Compression.UNCOMPRESSED,
    compresslevel: int = DEFAULT_COMPRESSLEVEL
) -> TextIO:
    """
    Open a file as a text stream, with gzip handling when requested.

    Args:
        filepath: Path to file
        mode: 'r' to read or 'w' to write
        compression: Compression of the file on disk
        compresslevel: gzip level used when writing (1-9)

    Returns:
        Text-mode file handle

    Raises:
        ValueError: If mode is not 'r' or 'w'
        OSError: If the file cannot be opened
    """
    if mode not in ('r', 'w'):
        raise ValueError(f"Unsupported stream mode: {mode!r} (use 'r' or 'w')")

    filepath = Path(filepath)

    if mode == 'w':
        # Create output directory if needed
        filepath.parent.mkdir(parents=True, exist_ok=True)

    if compression == Compression.GZIPPED:
        logger.debug(f"Opening gzip stream {filepath} (mode={mode})")
        if mode == 'r':
            return gzip.open(filepath, 'rt')
        return gzip.open(filepath, 'wt', compresslevel=compresslevel, newline='\n')

    logger.debug(f"Opening plain stream {filepath} (mode={mode})")
    if mode == 'w':
        return open(filepath, 'w', newline='\n')
    return open(filepath, 'r')


# StrandIO v0.1.0
# Any usage is subject to this software's license.
