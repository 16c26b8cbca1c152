# src/delay_coord/takens.py
import numpy as np
from typing import List, Union

from .geometry import CoordinateGeometry

def as_samples(x: np.ndarray) -> Union[np.ndarray, List[np.ndarray]]:
    """
    Per-sample view of an array series: 1D arrays are returned as-is,
    2D arrays of shape (N, c) as a list of their N rows (no copies).
    """
    x = np.asarray(x)
    if x.ndim == 1:
        return x
    if x.ndim == 2:
        return list(x)
    raise ValueError(f"Expected a 1D or 2D series, got ndim = {x.ndim}.")

def takens_embed(x: np.ndarray, geometry: CoordinateGeometry) -> np.ndarray:
    """
    Delay-embedding of a series x with the index law of `geometry`.
    1D x of length N      -> array of shape (N_embed, dimension).
    2D x of shape (N, c)  -> array of shape (N_embed, dimension * c), each
                             row the concatenation of the mapped samples.
    Too-short series give an empty (0, width) array.
    """
    x = np.asarray(x)
    if x.ndim not in (1, 2):
        raise ValueError(f"Expected a 1D or 2D series, got ndim = {x.ndim}.")
    N = x.shape[0]
    c = 1 if x.ndim == 1 else x.shape[1]
    m = geometry.dimension
    w = geometry.window_size
    N_embed = N if w == 0 else max(0, N - w + 1)
    X = np.zeros((N_embed, m * c), dtype = x.dtype)
    if N_embed == 0:
        return X
    for k in range(m):
        off = geometry.map_coord(k)
        cols = x[off : off + N_embed]
        if x.ndim == 1:
            X[:, k] = cols
        else:
            X[:, k * c : (k + 1) * c] = cols
    return X
