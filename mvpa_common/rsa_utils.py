"""
Representational Similarity Analysis (RSA) utilities.

This module computes dissimilarity matrices (DSMs) between the samples of a
dataset and returns them as datasets themselves, so they can be displayed,
saved and compared with the same tools as any other dataset.

A DSM dataset has
- samples: (n_pairs x 1) column of pairwise distances
- sa.targets1, sa.targets2: 1-based indices of the two targets of each pair
  (targets1 > targets2, i.e. the lower triangle)
- a.sdim: labels ['targets1', 'targets2'] and the target values they index
"""

import logging

import numpy as np
from scipy.spatial.distance import pdist

logger = logging.getLogger(__name__)

SDIM_LABELS = ['targets1', 'targets2']


def dissimilarity_matrix_measure(ds: dict, metric: str = 'correlation', center_data: bool = False) -> dict:
    """
    Compute the pairwise dissimilarity between all samples of a dataset.

    Parameters
    ----------
    ds : dict
        Dataset with .samples and .sa.targets; every target must occur exactly
        once (average repeated samples first).
    metric : str, default='correlation'
        Any metric supported by scipy.spatial.distance.pdist
        ('correlation', 'euclidean', 'cosine', ...)
    center_data : bool, default=False
        If True, subtract the mean across samples from each feature first.

    Returns
    -------
    dict
        DSM dataset with an (n_pairs x 1) samples column; pairs are ordered
        as in pdist, sorted by target value.

    Raises
    ------
    ValueError
        If targets are missing or not unique.

    Example
    -------
    >>> ds = synthetic_dataset(ntargets=4, nchunks=1)
    >>> dsm = dissimilarity_matrix_measure(ds)
    >>> dsm['samples'].shape
    (6, 1)
    >>> dsm['sa']['targets1'].ravel()
    array([2, 3, 4, 3, 4, 4])
    """
    if 'targets' not in ds.get('sa', {}):
        raise ValueError("Dataset has no .sa.targets")

    targets = np.asarray(ds['sa']['targets']).ravel()
    unique_targets, counts = np.unique(targets, return_counts=True)
    if np.any(counts != 1):
        repeated = unique_targets[counts != 1].tolist()
        raise ValueError(
            f"Each target must occur exactly once, found repeated targets {repeated}. "
            f"Average samples per target first."
        )

    order = np.argsort(targets, kind='stable')
    samples = np.asarray(ds['samples'], dtype=float)[order]
    if center_data:
        samples = samples - samples.mean(axis=0, keepdims=True)

    distances = pdist(samples, metric=metric)

    # pdist order is the row-major upper triangle (i < j); targets1 takes the larger index
    i, j = np.triu_indices(len(targets), k=1)

    logger.debug(f"Computed {metric} DSM for {len(targets)} targets ({len(distances)} pairs)")

    return {
        'samples': distances.reshape(-1, 1),
        'sa': {
            'targets1': (j + 1).reshape(-1, 1),
            'targets2': (i + 1).reshape(-1, 1),
        },
        'a': {
            'sdim': {
                'labels': list(SDIM_LABELS),
                'values': [unique_targets, unique_targets],
            },
        },
    }


def dsm_to_matrix(ds_dsm: dict, fill: float = np.nan) -> np.ndarray:
    """
    Convert a DSM dataset to a square matrix.

    Parameters
    ----------
    ds_dsm : dict
        Output of dissimilarity_matrix_measure.
    fill : float, default=np.nan
        Value for the diagonal and the upper triangle.

    Returns
    -------
    np.ndarray
        (n_targets x n_targets) matrix with the distances in the lower triangle.

    Example
    -------
    >>> mat = dsm_to_matrix(dsm, fill=0)
    >>> mat = mat + mat.T  # symmetric RDM with zeros on the diagonal
    """
    n_targets = len(ds_dsm['a']['sdim']['values'][0])
    rows = np.asarray(ds_dsm['sa']['targets1']).ravel() - 1
    cols = np.asarray(ds_dsm['sa']['targets2']).ravel() - 1

    matrix = np.full((n_targets, n_targets), fill, dtype=float)
    matrix[rows, cols] = np.asarray(ds_dsm['samples']).ravel()
    return matrix


__all__ = [
    'dissimilarity_matrix_measure',
    'dsm_to_matrix',
]
