"""
Logging for the package and its numbered scripts.

Library modules log through `logging.getLogger(__name__)`; all of them are
children of the 'mvpa_common' logger, so configuring that one logger (file +
console) captures dataset generation, depth-budget and NIfTI export messages
from every module.

Usage
-----
>>> from mvpa_common.logging_utils import setup_analysis, log_dataset_summary
>>> config, output_dir, logger = setup_analysis("dataset_display", Path("results"), __file__)
>>> ds = synthetic_dataset(seed=config['RANDOM_SEED'])
>>> log_dataset_summary(logger, "fmri", ds)
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from .display import render
from .io_utils import copy_script_to_results

LOGGER_NAME = 'mvpa_common'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def _get_log_level_from_env() -> int:
    """
    Level from MVPA_LOG_LEVEL (DEBUG, INFO, WARNING or ERROR, case-insensitive).

    DEBUG adds the full configuration, dataset renderings and depth-budget
    messages; anything unset or unrecognized means INFO.
    """
    name = os.environ.get('MVPA_LOG_LEVEL', 'INFO').upper()
    return getattr(logging, name) if name in _LEVEL_NAMES else logging.INFO


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(log_file=None, level=None, console=True):
    """
    Configure the package logger.

    Parameters
    ----------
    log_file : str or Path, optional
        Log file (overwritten); parent directories are created.
    level : int, optional
        Logging level; defaults to MVPA_LOG_LEVEL (INFO if unset).
    console : bool, default=True
        Also log to stdout.

    Returns
    -------
    logging.Logger
        The 'mvpa_common' logger. Handlers from a previous call are closed
        and replaced, and messages do not propagate to the root logger.
    """
    if level is None:
        level = _get_log_level_from_env()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for old in list(logger.handlers):
        old.close()
        logger.removeHandler(old)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_handler(logging.FileHandler(log_file, mode='w'), level))
    if console:
        logger.addHandler(_handler(logging.StreamHandler(sys.stdout), level))

    logger.propagate = False
    return logger


def log_script_start(logger, script_path, config_dict=None):
    """Header with the script name; the configuration goes to DEBUG."""
    logger.info("=" * 80)
    logger.info(Path(script_path).name)
    logger.info("=" * 80)

    if config_dict is None:
        return
    logger.debug(f"Started: {datetime.now().strftime(DATE_FORMAT)}")
    logger.debug("Configuration:")
    for key, value in config_dict.items():
        logger.debug(f"  {key}: {value}")


def log_script_end(logger):
    """Log the end of a script."""
    logger.info("=" * 80)
    logger.info(f"Completed: {datetime.now().strftime(DATE_FORMAT)}")
    logger.info("=" * 80)


def log_dataset_summary(logger, name: str, ds: dict) -> None:
    """
    One INFO line with the size and attribute names of a dataset; its full
    depth-limited rendering at DEBUG.

    Example
    -------
    >>> log_dataset_summary(logger, "fmri", synthetic_dataset())
    ... - INFO - fmri: 6 samples x 6 features; sa: targets, chunks; fa: i, j, k
    """
    n_samples, n_features = ds['samples'].shape
    sa = ', '.join(ds.get('sa', {})) or '-'
    fa = ', '.join(ds.get('fa', {})) or '-'
    logger.info(f"{name}: {n_samples} samples x {n_features} features; sa: {sa}; fa: {fa}")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"{name}:\n{render(ds, max_depth=2)}")


def setup_analysis(
    analysis_name: str,
    results_base: Path,
    script_file: str,
    extra_config: dict = None,
) -> tuple:
    """
    Prepare the results directory and logging of a numbered script.

    The output directory is results_base/<analysis_name> (reused across
    runs); it receives analysis.log and a copy of the script. Randomness is
    not seeded globally: scripts pass config['RANDOM_SEED'] to the functions
    that draw random numbers (e.g. synthetic_dataset(seed=...)).

    Parameters
    ----------
    analysis_name : str
        Name of the results subdirectory (e.g., "dataset_display")
    results_base : Path
        Base directory for results; created if missing
    script_file : str
        Path to the running script (use __file__)
    extra_config : dict, optional
        Script-specific parameters, merged over CONFIG

    Returns
    -------
    config : dict
        CONFIG (paths as strings) + OUTPUT_DIR + extra_config
    output_dir : Path
        Output directory
    logger : logging.Logger
        Configured package logger
    """
    from .constants import CONFIG

    output_dir = Path(results_base) / analysis_name
    output_dir.mkdir(parents=True, exist_ok=True)

    logger = setup_logging(output_dir / "analysis.log")
    copy_script_to_results(Path(script_file), output_dir, logger)

    config = {key: str(value) if isinstance(value, Path) else value for key, value in CONFIG.items()}
    config['OUTPUT_DIR'] = str(output_dir)
    config.update(extra_config or {})

    log_script_start(logger, script_file, config)
    return config, output_dir, logger


__all__ = [
    'setup_logging',
    'log_script_start',
    'log_script_end',
    'log_dataset_summary',
    'setup_analysis',
]
