"""
Neuroimaging utilities for converting fMRI datasets to and from NIfTI.

Datasets store volumes flattened: one feature per voxel, with 1-based voxel
indices in fa.i, fa.j, fa.k and the volume geometry in a.vol (mat: 4x4
voxel-to-world matrix for 1-based indices, dim: volume size).

Dependencies
------------
- nibabel: For NIfTI file I/O
- numpy: For array operations
"""

import logging
from pathlib import Path
from typing import Optional, Union

import nibabel as nib
import numpy as np

from .constants import CONFIG
from .datasets import check_dataset

logger = logging.getLogger(__name__)


def load_nifti(file_path):
    """
    Load a NIfTI file.

    Parameters
    ----------
    file_path : str or Path
        Path to NIfTI file (.nii, .nii.gz, or .hdr/.img pair)

    Returns
    -------
    nibabel image
        Loaded image object

    Raises
    ------
    FileNotFoundError
        If file does not exist

    Example
    -------
    >>> img = load_nifti('results/dataset_display/ds.nii.gz')
    >>> data = img.get_fdata()
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"NIfTI file not found: {file_path}")

    return nib.load(str(file_path))


def unflatten_volume(ds: dict) -> np.ndarray:
    """
    Reconstruct the 4D volume (x, y, z, n_samples) of an fMRI dataset.

    Voxels without a feature are filled with zeros.

    Example
    -------
    >>> ds = synthetic_dataset(size='normal')
    >>> unflatten_volume(ds).shape
    (3, 2, 5, 6)
    """
    check_dataset(ds, 'fmri')

    samples = ds['samples']
    dim = tuple(int(d) for d in np.asarray(ds['a']['vol']['dim']).ravel())
    volume = np.zeros(dim + (samples.shape[0],), dtype=samples.dtype)

    i, j, k = (np.asarray(ds['fa'][name]).ravel() - 1 for name in ('i', 'j', 'k'))
    volume[i, j, k, :] = samples.T
    return volume


def vol_affine(mat) -> np.ndarray:
    """Convert a voxel-to-world matrix for 1-based indices to a NIfTI (0-based) affine."""
    mat = np.asarray(mat, dtype=float)
    affine = mat.copy()
    affine[:3, 3] += mat[:3, :3] @ np.ones(3)
    return affine


def _has_nifti_extension(path: Path) -> bool:
    return any(path.name.endswith(ext) for ext in CONFIG['NIFTI_EXTENSIONS'])


def map2fmri(ds: dict, fn: Optional[Union[str, Path]] = None) -> nib.Nifti1Image:
    """
    Convert an fMRI dataset to a NIfTI image, optionally saving it.

    Parameters
    ----------
    ds : dict
        fMRI dataset (see check_dataset with kind='fmri')
    fn : str or Path, optional
        Output file; must end with one of CONFIG['NIFTI_EXTENSIONS'].
        Parent directories are created.

    Returns
    -------
    nibabel.Nifti1Image
        float32 image, 3D for a single sample and 4D otherwise

    Raises
    ------
    ValueError
        If `fn` has an unsupported extension.

    Example
    -------
    >>> img = map2fmri(ds, 'results/dataset_display/ds.nii.gz')
    >>> img.shape
    (3, 2, 5, 6)
    """
    if fn is not None and not _has_nifti_extension(Path(fn)):
        raise ValueError(
            f"Unsupported output format for {fn}. "
            f"Supported extensions: {', '.join(CONFIG['NIFTI_EXTENSIONS'])}"
        )

    volume = unflatten_volume(ds).astype(np.float32)
    if volume.shape[-1] == 1:
        volume = volume[..., 0]

    img = nib.Nifti1Image(volume, vol_affine(ds['a']['vol']['mat']))

    if fn is not None:
        output_path = Path(fn)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        nib.save(img, str(output_path))
        logger.debug(f"Saved NIfTI image {volume.shape} to {output_path}")

    return img


__all__ = [
    'load_nifti',
    'unflatten_volume',
    'vol_affine',
    'map2fmri',
]
