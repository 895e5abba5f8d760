#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Display Synthetic Datasets - Text Renderings of Datasets and DSMs

METHODS
=======

Rationale
---------
Datasets and analysis results are deeply nested structures (sample and feature
attributes, volume geometry, channel labels, pairwise distances). Before running
an analysis it is useful to inspect them at a glance: which attributes are
present, their sizes, and the first and last few values of each. This script
builds the synthetic datasets used throughout the examples and writes their
text renderings to the results directory.

Data
----
Synthetic datasets generated with mvpa_common.datasets.synthetic_dataset:
- fMRI, size 'normal' (3 x 2 x 5 voxels), 2 targets x 3 chunks
- MEEG time-frequency, size 'big' (306 channels x 7 frequencies x 5 time
  points), 4 targets x 5 chunks
- Dissimilarity matrix (correlation distance) of the fMRI dataset averaged
  per target

Display
-------
Renderings use mvpa_common.display.render with the defaults from CONFIG
(threshold, edge items, precision, depth). Axes longer than the threshold show
their first and last edge items separated by ':' (rows) and '...' (columns).

Outputs
-------
All results are saved to results/dataset_display/:
- fmri_dataset.txt: Full rendering of the fMRI dataset
- fmri_dataset_depth1.txt: Top-level overview (max_depth=1)
- timefreq_dataset.txt: Rendering of the MEEG time-frequency dataset
- fmri_dsm.txt: Rendering of the dissimilarity matrix dataset
- fmri_dataset.nii.gz: fMRI dataset as a 4D NIfTI image
- 01_display_synthetic_dataset.py: Copy of this script
"""

import os
import sys
from pathlib import Path

import numpy as np

# Add parent (repo root) to sys.path for 'mvpa_common'
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
script_dir = Path(__file__).parent

from mvpa_common import setup_analysis, log_script_end
from mvpa_common.logging_utils import log_dataset_summary
from mvpa_common.datasets import synthetic_dataset
from mvpa_common.io_utils import save_rendering
from mvpa_common.neuro_utils import map2fmri
from mvpa_common.rsa_utils import dissimilarity_matrix_measure


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

FMRI_SIZE = 'normal'
TIMEFREQ_SIZE = 'big'
DSM_METRIC = 'correlation'

config, output_dir, logger = setup_analysis(
    analysis_name="dataset_display",
    results_base=script_dir / "results",
    script_file=__file__,
    extra_config={
        'FMRI_SIZE': FMRI_SIZE,
        'TIMEFREQ_SIZE': TIMEFREQ_SIZE,
        'DSM_METRIC': DSM_METRIC,
    },
)


# -----------------------------------------------------------------------------
# fMRI dataset
# -----------------------------------------------------------------------------

ds_fmri = synthetic_dataset(size=FMRI_SIZE, data_type='fmri', seed=config['RANDOM_SEED'])
log_dataset_summary(logger, "fMRI dataset", ds_fmri)

save_rendering(ds_fmri, output_dir / "fmri_dataset.txt", logger)
save_rendering(ds_fmri, output_dir / "fmri_dataset_depth1.txt", logger, max_depth=1)
map2fmri(ds_fmri, output_dir / "fmri_dataset.nii.gz")
logger.info(f"Saved NIfTI image to: {output_dir / 'fmri_dataset.nii.gz'}")


# -----------------------------------------------------------------------------
# MEEG time-frequency dataset
# -----------------------------------------------------------------------------

ds_tf = synthetic_dataset(
    size=TIMEFREQ_SIZE, data_type='timefreq', ntargets=4, nchunks=5, seed=config['RANDOM_SEED']
)
log_dataset_summary(logger, "Time-frequency dataset", ds_tf)

save_rendering(ds_tf, output_dir / "timefreq_dataset.txt", logger)


# -----------------------------------------------------------------------------
# Dissimilarity matrix of the per-target average
# -----------------------------------------------------------------------------

targets = ds_fmri['sa']['targets'].ravel()
unique_targets = np.unique(targets)
ds_avg = {
    'samples': np.vstack([ds_fmri['samples'][targets == t].mean(axis=0) for t in unique_targets]),
    'sa': {'targets': unique_targets.reshape(-1, 1)},
}

ds_dsm = dissimilarity_matrix_measure(ds_avg, metric=DSM_METRIC)
logger.info(f"DSM: {ds_dsm['samples'].shape[0]} pairs ({DSM_METRIC} distance)")

save_rendering(ds_dsm, output_dir / "fmri_dsm.txt", logger, precision=4)

log_script_end(logger)
logger.info(f"All outputs saved to: {output_dir}")
