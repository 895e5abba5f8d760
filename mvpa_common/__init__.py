"""
Common utilities for multivariate pattern analysis of neuroimaging data.

This package provides shared functionality across all analyses:
- constants: CONFIG dictionary with all defaults and lookup tables
- display: Text rendering of datasets and nested results (modular structure)
- datasets: Synthetic datasets and dataset validation
- logging_utils: Logging and analysis setup functions
- io_utils: Script copies and text renderings in results directories
- rsa_utils: Dissimilarity matrices between samples
- neuro_utils: NIfTI conversion of fMRI datasets

Example Usage
-------------
>>> from mvpa_common import CONFIG, setup_analysis
>>> from mvpa_common import synthetic_dataset, disp
>>> disp(synthetic_dataset(), max_depth=2)
"""

__version__ = "0.1.0"

# Configuration
from .constants import CONFIG

# Display
from .display import (
    RenderOptions,
    render,
    disp,
)

# Datasets
from .datasets import synthetic_dataset, check_dataset, neuromag_channels

# Logging and setup
from .logging_utils import setup_logging, setup_analysis, log_script_end

# IO utilities
from .io_utils import copy_script_to_results, save_rendering

# RSA utilities
from .rsa_utils import dissimilarity_matrix_measure, dsm_to_matrix

# Neuroimaging IO
from .neuro_utils import load_nifti, map2fmri, unflatten_volume

__all__ = [
    # Configuration
    'CONFIG',
    # Display
    'RenderOptions',
    'render',
    'disp',
    # Datasets
    'synthetic_dataset',
    'check_dataset',
    'neuromag_channels',
    # Logging and setup
    'setup_logging',
    'setup_analysis',
    'log_script_end',
    # IO utilities
    'copy_script_to_results',
    'save_rendering',
    # RSA utilities
    'dissimilarity_matrix_measure',
    'dsm_to_matrix',
    # Neuro IO
    'load_nifti',
    'map2fmri',
    'unflatten_volume',
]
