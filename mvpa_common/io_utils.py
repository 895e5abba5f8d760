"""
Input/output utilities for saving analysis outputs.

This module provides centralized functions for copying scripts into results
directories and writing text renderings of datasets next to them.
"""

from pathlib import Path
from typing import Optional
import shutil
import logging

from .display import render


def copy_script_to_results(
    script_path: Path,
    results_dir: Path,
    logger: Optional[logging.Logger] = None
) -> Path:
    """
    Copy the executing script to the results directory for reproducibility.

    This ensures that the exact code used to generate results is preserved
    alongside the outputs.

    Parameters
    ----------
    script_path : Path
        Path to the script file to copy (typically __file__)
    results_dir : Path
        Results directory where the script copy will be saved
    logger : logging.Logger, optional
        Logger instance for logging the copy operation

    Returns
    -------
    Path
        Path to the copied script file, or None if the script does not exist

    Notes
    -----
    - If the script file doesn't exist, a warning is logged but no error is raised
    - Preserves the original filename
    - Overwrites existing copies without warning
    """
    script_path = Path(script_path)
    results_dir = Path(results_dir)

    if not script_path.exists():
        msg = f"Script file not found: {script_path}"
        if logger:
            logger.warning(msg)
        else:
            import warnings
            warnings.warn(msg)
        return None

    results_dir.mkdir(parents=True, exist_ok=True)

    dest_path = results_dir / script_path.name
    shutil.copy(script_path, dest_path)

    if logger:
        logger.info(f"Copied script to: {dest_path}")

    return dest_path


def save_rendering(
    value,
    out_path: Path,
    logger: Optional[logging.Logger] = None,
    **display_options
) -> Path:
    """
    Write the text rendering of `value` (see mvpa_common.display.render) to a file.

    Parameters
    ----------
    value : Any
        Dataset, result dict, array, ... to render
    out_path : Path
        Destination text file; parent directories are created
    logger : logging.Logger, optional
        Logger instance for logging the write
    **display_options
        Passed to render(), e.g. threshold=10

    Returns
    -------
    Path
        The written file

    Example
    -------
    >>> ds = synthetic_dataset(size='normal')
    >>> save_rendering(ds, output_dir / 'dataset.txt', logger, precision=4)
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render(value, **display_options) + '\n')

    if logger:
        logger.info(f"Saved rendering to: {out_path}")

    return out_path


__all__ = [
    'copy_script_to_results',
    'save_rendering',
]
