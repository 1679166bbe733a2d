"""
StrandIO v0.1.0

Configuration schema for StrandIO.

Defines all available configuration parameters with defaults and validation.

Author: StrandIO Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
from typing import Dict, Any, List
from pathlib import Path
import yaml


LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Reader/Writer Settings
    # ========================================================================
    'io': {
        'fasta_line_width': 0,  # 0 = whole sequence on one line
        'gzip_compresslevel': 6,  # 1 (fast) .. 9 (small)
        'strict_fastq': True,  # Raise on a truncated final FASTQ record
    },

    # ========================================================================
    # Logging
    # ========================================================================
    'logging': {
        'level': 'INFO',  # 'DEBUG', 'INFO', 'WARNING', 'ERROR'
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    },
}


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def save_config_template(output_path: Path):
    """
    Save the default configuration to a YAML file.

    Args:
        output_path: Output file path
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        yaml.dump(copy.deepcopy(DEFAULT_CONFIG), f, default_flow_style=False, sort_keys=False)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []
    io_config = config.get('io', {})

    line_width = io_config.get('fasta_line_width', 0)
    if not isinstance(line_width, int) or isinstance(line_width, bool) or line_width < 0:
        errors.append(f"Invalid io.fasta_line_width: {line_width!r} (must be an integer >= 0)")

    level = io_config.get('gzip_compresslevel', 6)
    if not isinstance(level, int) or isinstance(level, bool) or not 1 <= level <= 9:
        errors.append(f"Invalid io.gzip_compresslevel: {level!r} (must be 1-9)")

    if not isinstance(io_config.get('strict_fastq', True), bool):
        errors.append("Invalid io.strict_fastq: must be true or false")

    log_level = config.get('logging', {}).get('level', 'INFO')
    if str(log_level).upper() not in LOG_LEVELS:
        errors.append(f"Invalid logging.level: {log_level!r} (must be one of {', '.join(LOG_LEVELS)})")

    return errors
