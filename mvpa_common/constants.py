"""
Central repository for all shared constants, defaults, and lookup tables.

All constants are exported via the CONFIG dictionary, which is the single source
of truth for all configuration values used across the package and its scripts.

Usage
-----
>>> from mvpa_common import CONFIG
>>> print(CONFIG['DISP_THRESHOLD'])
5
>>> print(CONFIG['SYNTH_DIM_SIZES']['small'])
(3, 2, 1)

Note: Display defaults are read from here by RenderOptions; override them per
call (render(x, precision=5)) rather than by editing CONFIG at runtime.
"""

from pathlib import Path

# ============================================================================
# Repository Paths (computed first for use in CONFIG)
# ============================================================================
_REPO_ROOT = Path(__file__).parent.parent  # Root of this git repository

# ============================================================================
# CONFIG Dictionary - All Constants in One Place
# ============================================================================
# This dictionary contains ALL constants, making it easy to:
# 1. Pass entire config to setup_analysis()
# 2. Log all configuration values
# 3. Access config programmatically

CONFIG = {
    # ========================================================================
    # Repository Structure
    # ========================================================================
    'REPO_ROOT': _REPO_ROOT,              # Root of this git repository
    # Note: Results directories are script-specific and created via
    # logging_utils.setup_analysis() under each script folder's results/.

    # ========================================================================
    # Analysis Parameters
    # ========================================================================
    'RANDOM_SEED': 42,                    # Reproducibility seed (np.random.seed in setup_analysis)

    # ========================================================================
    # Structured-Value Display (mvpa_common.display)
    # ========================================================================
    'DISP_THRESHOLD': 5,                  # Items along an axis before summary style kicks in
    'DISP_EDGEITEMS': 3,                  # Items kept at each edge in summary style
    'DISP_PRECISION': 3,                  # Significant digits for numbers ('%.3g')
    'DISP_STRLEN': 20,                    # Strings wider than this get a ' ... ' infix
    'DISP_DEPTH': 6,                      # Recursion budget for nested containers
    'DISP_SHOW_SIZE': False,              # Always append @AxB shape suffix

    # ========================================================================
    # Synthetic Datasets (mvpa_common.datasets)
    # ========================================================================
    'SYNTH_SEED': 0,                      # Seed for sample generation (deterministic datasets)
    'SYNTH_SIGMA': 3.0,                   # Class separation parameter
    'SYNTH_NTARGETS': 2,                  # Default number of unique targets
    'SYNTH_NCHUNKS': 3,                   # Default number of unique chunks
    'SYNTH_DIM_SIZES': {                  # Feature dimension sizes; None = use all values
        'tiny': (2, 1, 1),
        'small': (3, 2, 1),
        'normal': (3, 2, 5),
        'big': (None, 7, 5),
        'huge': (None, 17, 19),
    },
    'SYNTH_VOXEL_SIZE_MM': 10,            # Voxel edge length of the fmri affine
    'SYNTH_TIME_RANGE': (-0.2, 1.3, 0.05),  # MEEG time axis: start, stop (inclusive), step
    'SYNTH_FREQ_RANGE': (2, 40, 2),       # Time-frequency axis: start, stop (inclusive), step
    'SYNTH_SURFACE_NODES': 4000,          # Number of nodes for surface datasets
    'NEUROMAG_GRID': (26, 4),             # Channel location grid of the simulated neuromag system
    'NEUROMAG_MISSING': (8, (3, 4)),      # Grid positions without a sensor (row, columns)

    # ========================================================================
    # Volumetric Export (mvpa_common.neuro_utils)
    # ========================================================================
    'NIFTI_EXTENSIONS': ('.nii', '.nii.gz', '.hdr', '.img'),
}

__all__ = [
    'CONFIG',
]
