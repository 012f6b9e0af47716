#!/usr/bin/env python3
"""
Filename utilities for generating output filenames.
"""

import os
import logging

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 180


def generate_output_filename(input_filename: str, extension: str = ".wkt") -> str:
    """
    Generates an output filename and reserves it by creating an empty file.

    Strategy:
    1. Drop the input's extension
    2. Append the output extension
    3. If file exists, try " (1)", " (2)", etc. (by attempting to create exclusively)
    4. Stop at 180 attempts

    Args:
        input_filename: Path to the input file
        extension: Extension of the output file, including the dot

    Returns:
        Safe output filename that has been created as an empty file to reserve its name

    Raises:
        RuntimeError: If no available filename found after 180 attempts
        ValueError: If a filename cannot be created (e.g., due to permissions or an invalid name detected by the OS)
    """
    input_dir = os.path.dirname(input_filename)
    base_name, _ = os.path.splitext(os.path.basename(input_filename))

    candidates = [base_name + extension] + [
        f"{base_name} ({i}){extension}" for i in range(1, MAX_ATTEMPTS + 1)
    ]

    for name in candidates:
        candidate = os.path.join(input_dir, name)
        try:
            with open(candidate, "x"):
                pass  # File created successfully and is kept
            return candidate
        except FileExistsError:
            continue
        except (PermissionError, OSError) as e:
            logger.error(f"Cannot create file {candidate}: {e}")
            raise ValueError(f"Cannot create file: {e}")

    logger.error(
        f"Could not find an available filename after {MAX_ATTEMPTS} attempts. "
        f"Please clean up your output directory or specify --output explicitly."
    )
    raise RuntimeError(f"No available filename found after {MAX_ATTEMPTS} attempts")
