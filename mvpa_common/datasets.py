"""
Synthetic dataset generation and dataset validation.

A dataset is a plain dict with the fields
- samples: (n_samples x n_features) float array
- fa: feature attributes, one 1D array of length n_features per attribute
- a: dataset attributes (feature dimension labels/values, volume geometry, ...)
- sa: sample attributes, one (n_samples x 1) array per attribute

Synthetic datasets have a known class structure and are deterministic for a
given seed, which makes them suitable for examples, tests and demos of the
display utilities.

Example
-------
>>> from mvpa_common.datasets import synthetic_dataset
>>> from mvpa_common.display import disp
>>> ds = synthetic_dataset()
>>> ds['samples'].shape
(6, 6)
>>> disp(ds['fa'])
.i
  [ 1         2         3         1         2         3 ]
.j
  [ 1         1         1         2         2         2 ]
.k
  [ 1         1         1         1         1         1 ]
"""

import itertools
import logging
import numbers
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .constants import CONFIG

logger = logging.getLogger(__name__)

# (option name, sample attribute name), in Cartesian-product order
SAMPLE_FACTORS = [
    ('ntargets', 'targets'),
    ('nchunks', 'chunks'),
    ('nmodalities', 'modality'),
    ('nsubjects', 'subject'),
    ('nreps', 'rep'),
]

MEEG_TYPES = ('meeg', 'timelock', 'timefreq')
DATA_TYPES = ('fmri', 'surface') + MEEG_TYPES

# Neuromag sensor columns per location: magnetometer, two planar gradiometers, combined planar
_CHANNEL_COLUMNS = {
    'all': (0, 1, 2),
    'mag': (0,),
    'planar': (1, 2),
    'cmb': (3,),
    'combined': (3,),
}


def cartprod(*factors: Sequence) -> np.ndarray:
    """
    Cartesian product of factors, first factor varying fastest.

    Returns
    -------
    np.ndarray
        (n_combinations x n_factors) array, one combination per row.

    Example
    -------
    >>> cartprod([1, 2], [1, 2, 3])[:, 0]
    array([1, 2, 1, 2, 1, 2])
    """
    combos = [combo[::-1] for combo in itertools.product(*reversed(factors))]
    return np.array(combos).reshape(len(combos), len(factors))


def neuromag_channels(chan: str = 'all') -> List[str]:
    """
    Channel labels of a simulated 306-channel neuromag system.

    Parameters
    ----------
    chan : str, default='all'
        'all' (magnetometers + planar gradiometers), 'mag', 'planar',
        'combined' (or 'cmb'); types can be joined with '+', e.g. 'mag+combined'.

    Returns
    -------
    list of str
        Labels such as 'MEG0111', grouped per sensor location.

    Raises
    ------
    ValueError
        For unknown channel types, or when planar and combined are requested together.
    """
    n_rows, n_cols = CONFIG['NEUROMAG_GRID']
    missing_row, missing_cols = CONFIG['NEUROMAG_MISSING']

    locations = [
        (int(i), int(j))
        for i, j in cartprod(range(1, n_rows + 1), range(1, n_cols + 1))
        if not (i == missing_row and j in missing_cols)
    ]

    keep = set()
    for tp in chan.split('+'):
        if tp not in _CHANNEL_COLUMNS:
            raise ValueError(f"Unsupported channel type {tp}. Supported are: {', '.join(_CHANNEL_COLUMNS)}")
        keep.update(_CHANNEL_COLUMNS[tp])
    if keep & {1, 2} and 3 in keep:
        raise ValueError("planar and cmb/combined are mutually exclusive")

    labels = []
    for i, j in locations:
        per_location = [f"MEG{i:02d}{j}{k}" for k in (1, 2, 3)]
        per_location.append(f"MEG{i:02d}{j}2+{i:02d}{j}3")
        labels.extend(label for col, label in enumerate(per_location) if col in keep)
    return labels


def _inclusive_range(start, stop, step) -> np.ndarray:
    n = int(round((stop - start) / step)) + 1
    return np.round(start + step * np.arange(n), 10)


def _dimension_labels_values(data_type: str, chan: str) -> Tuple[List[str], list, Dict]:
    """Feature dimension labels and values, plus type-specific dataset attributes."""
    attrs = {}
    if data_type == 'fmri':
        mat = np.eye(4)
        mat[:3, :3] *= CONFIG['SYNTH_VOXEL_SIZE_MM']
        attrs['vol'] = {'mat': mat}
        labels = ['i', 'j', 'k']
        values = [np.arange(1, 21) for _ in labels]

    elif data_type in MEEG_TYPES:
        # dimension values are stored as columns, one row per channel, frequency or time point
        channels = np.array(neuromag_channels(chan), dtype=object).reshape(-1, 1)
        time = _inclusive_range(*CONFIG['SYNTH_TIME_RANGE']).reshape(-1, 1)
        if data_type == 'timefreq':
            freq = _inclusive_range(*CONFIG['SYNTH_FREQ_RANGE']).reshape(-1, 1)
            labels = ['chan', 'freq', 'time']
            values = [channels, freq, time]
            meeg = {'samples_type': 'freq', 'samples_field': 'powspctrm'}
        else:
            labels = ['chan', 'time']
            values = [channels, time]
            meeg = {'samples_type': 'timelock', 'samples_field': 'trial'}
        meeg['samples_label'] = 'rpt'
        attrs['meeg'] = meeg

    elif data_type == 'surface':
        labels = ['node_indices']
        values = [np.arange(1, CONFIG['SYNTH_SURFACE_NODES'] + 1)]

    else:
        raise ValueError(f"Unsupported type '{data_type}'. Supported are: {', '.join(DATA_TYPES)}")

    return labels, values, attrs


def _dimension_sizes(size: str, values: list) -> Tuple[int, ...]:
    size_table = CONFIG['SYNTH_DIM_SIZES']
    if size not in size_table:
        raise ValueError(f"Unsupported size {size}. Supported are: {', '.join(size_table)}")
    sizes = size_table[size][:len(values)]
    return tuple(len(v) if n is None else n for n, v in zip(sizes, values))


def flatten_feature_attributes(labels: Sequence[str], dim_sizes: Sequence[int]) -> Dict[str, np.ndarray]:
    """
    1-based feature indices per dimension, first dimension varying fastest.

    Example
    -------
    >>> flatten_feature_attributes(['i', 'j'], (3, 2))['j']
    array([1, 1, 1, 2, 2, 2])
    """
    n_features = int(np.prod(dim_sizes))
    indices = np.unravel_index(np.arange(n_features), tuple(dim_sizes), order='F')
    return {label: idx + 1 for label, idx in zip(labels, indices)}


def _generate_samples(targets: np.ndarray, n_features: int, class_distance: float, seed: int) -> np.ndarray:
    """Standard-normal samples with a class-dependent offset on a subset of features."""
    targets = targets.ravel()
    n_classes = len(np.unique(targets))

    rng = np.random.default_rng(seed)
    samples = rng.standard_normal((len(targets), n_features))

    feature_ids = np.arange(1, n_features + 1)[None, :]
    class_mask = np.mod(feature_ids - targets[:, None], n_classes + 1) == 0
    samples[class_mask] += class_distance
    return samples


def synthetic_dataset(
    size: str = 'small',
    data_type: str = 'fmri',
    chan: str = 'all',
    sigma: float = CONFIG['SYNTH_SIGMA'],
    ntargets: Optional[int] = CONFIG['SYNTH_NTARGETS'],
    nchunks: Optional[int] = CONFIG['SYNTH_NCHUNKS'],
    nmodalities: Optional[int] = None,
    nsubjects: Optional[int] = None,
    nreps: Optional[int] = None,
    targets=None,
    chunks=None,
    seed: Optional[int] = None,
) -> dict:
    """
    Generate a synthetic dataset with a known class structure.

    Parameters
    ----------
    size : str, default='small'
        Number of features: 'tiny', 'small', 'normal', 'big' or 'huge'
        (see CONFIG['SYNTH_DIM_SIZES']).
    data_type : str, default='fmri'
        'fmri', 'meeg' (same as 'timelock'), 'timelock', 'timefreq' or 'surface'.
    chan : str, default='all'
        Channel selection for MEEG types (see neuromag_channels).
    sigma : float, default=3.0
        Class separation; larger values make classes more discriminable.
    ntargets, nchunks, nmodalities, nsubjects, nreps : int or None
        Number of unique values of each sample attribute. Attributes set to
        None are not stored. The dataset has the product of all given values
        as number of samples.
    targets, chunks : scalar, optional
        Overwrite the corresponding sample attribute with a constant value
        (applied after the samples are generated).
    seed : int, optional
        Random seed; defaults to CONFIG['SYNTH_SEED'].

    Returns
    -------
    dict
        Dataset with fields samples, fa, a, sa.

    Raises
    ------
    ValueError
        For unsupported size/type/channels, missing targets, or non-scalar overrides.

    Example
    -------
    >>> ds = synthetic_dataset(data_type='timefreq', size='big', nchunks=5, ntargets=4)
    >>> ds['samples'].shape
    (20, 10710)
    """
    labels, values, attrs = _dimension_labels_values(data_type, chan)
    dim_sizes = _dimension_sizes(size, values)
    values = [v[:n] for v, n in zip(values, dim_sizes)]
    n_features = int(np.prod(dim_sizes))

    counts = dict(zip(
        (option for option, _ in SAMPLE_FACTORS),
        (ntargets, nchunks, nmodalities, nsubjects, nreps),
    ))
    if counts['ntargets'] is None:
        raise ValueError("ntargets is required to generate class structure")

    combos = cartprod(*(range(1, max(counts[option] or 1, 1) + 1) for option, _ in SAMPLE_FACTORS))
    sa = {}
    for k, (option, attr) in enumerate(SAMPLE_FACTORS):
        if counts[option] is not None:
            sa[attr] = combos[:, k].reshape(-1, 1)

    n_elements = np.log(n_features * max(nreps or 1, 1))
    class_distance = sigma / n_elements

    if seed is None:
        seed = CONFIG['SYNTH_SEED']
    samples = _generate_samples(sa['targets'], n_features, class_distance, seed)
    n_samples = samples.shape[0]

    for name, override in (('chunks', chunks), ('targets', targets)):
        if override is None:
            continue
        if not isinstance(override, numbers.Number):
            raise ValueError(f"Value for '{name}' must be a scalar")
        sa[name] = np.full((n_samples, 1), override)

    a = {'fdim': {'labels': labels, 'values': values}}
    a.update(attrs)
    if data_type == 'fmri':
        a['vol']['dim'] = np.array(dim_sizes)

    ds = {
        'samples': samples,
        'fa': flatten_feature_attributes(labels, dim_sizes),
        'a': a,
        'sa': sa,
    }
    check_dataset(ds)

    logger.debug(
        f"Generated synthetic {data_type} dataset ({size}): "
        f"{n_samples} samples x {n_features} features, class distance {class_distance:.3f}"
    )
    return ds


def check_dataset(ds: dict, kind: Optional[str] = None) -> None:
    """
    Validate the structure of a dataset.

    Parameters
    ----------
    ds : dict
        Dataset to check.
    kind : str, optional
        'fmri' additionally requires volume geometry (a.vol.mat, a.vol.dim)
        and the voxel indices fa.i, fa.j, fa.k.

    Raises
    ------
    ValueError
        Naming the first field that is missing or has the wrong size.
    """
    samples = ds.get('samples') if isinstance(ds, dict) else None
    if not isinstance(samples, np.ndarray) or samples.ndim != 2:
        raise ValueError("Dataset must have a 2D .samples array")
    n_samples, n_features = samples.shape

    for name, values in ds.get('fa', {}).items():
        n = np.asarray(values).size
        if n != n_features:
            raise ValueError(f".fa.{name} has {n} values, expected {n_features} (number of features)")

    for name, values in ds.get('sa', {}).items():
        n = len(values)
        if n != n_samples:
            raise ValueError(f".sa.{name} has {n} values, expected {n_samples} (number of samples)")

    fdim = ds.get('a', {}).get('fdim')
    if fdim is not None and len(fdim.get('labels', [])) != len(fdim.get('values', [])):
        raise ValueError(".a.fdim.labels and .a.fdim.values must have the same length")

    if kind == 'fmri':
        vol = ds.get('a', {}).get('vol')
        if vol is None or 'mat' not in vol or 'dim' not in vol:
            raise ValueError("fmri dataset requires .a.vol.mat and .a.vol.dim")
        if np.asarray(vol['mat']).shape != (4, 4):
            raise ValueError(f".a.vol.mat must be 4x4, got {np.asarray(vol['mat']).shape}")
        missing = [dim for dim in ('i', 'j', 'k') if dim not in ds.get('fa', {})]
        if missing:
            raise ValueError(f"fmri dataset requires feature attributes {missing}")
    elif kind is not None:
        raise ValueError(f"Unsupported dataset kind '{kind}'")


__all__ = [
    'synthetic_dataset',
    'check_dataset',
    'cartprod',
    'neuromag_channels',
    'flatten_feature_attributes',
]
