#!/usr/bin/env python3
from abc import ABC, abstractmethod

import numpy as np

from ..errors import ConfigurationError, DimensionMismatch
from ..image import Image

# Opposite neighbour pairs (dr, dc) scanned for zero crossings:
# vertical, horizontal, main diagonal, anti-diagonal
OPPOSITE_PAIRS = (
    ((-1, 0), (1, 0)),
    ((0, -1), (0, 1)),
    ((-1, -1), (1, 1)),
    ((-1, 1), (1, -1)),
)
NEIGHBOURS = tuple(offset for pair in OPPOSITE_PAIRS for offset in pair)


def check_pair(dest: Image, src: Image):
    """Reject aliased or differently sized destination/source images."""
    if dest is src:
        raise ConfigurationError("Destination image must be distinct from the source image")
    if not dest.same_size(src):
        raise DimensionMismatch(expected=src.shape, actual=dest.shape)


class ConvolutionBackend(ABC):
    """
    Execution backend capability shared by every filter.

    A backend evaluates convolution passes and the per-pixel reductions of
    the composite operators. All implementations follow the same contract:

    - dest[r][c] = sum_{i,j} src[r+i-R][c+j-R] * kernel[i][j]
    - taps falling outside the source are omitted (implicit zero outside
      the image, no clamping, no renormalisation)
    - taps accumulate in row-major kernel order in float32
    - dest and src are distinct images of identical size; every dest pixel
      is written exactly once and the call returns only when the whole pass
      is complete
    """
    name = "abstract"

    @abstractmethod
    def convolve_2d(self, dest: Image, src: Image, kernel: np.ndarray, radius: int):
        """Full 2D convolution with a [2R+1, 2R+1] kernel."""

    @abstractmethod
    def convolve_rows(self, dest: Image, src: Image, kernel: np.ndarray, radius: int):
        """1D convolution along each row with a [2R+1] kernel."""

    @abstractmethod
    def convolve_columns(self, dest: Image, src: Image, kernel: np.ndarray, radius: int):
        """1D convolution along each column with a [2R+1] kernel."""

    @abstractmethod
    def gradient_magnitude(self, vert: Image, horz: Image):
        """vert = sqrt(vert^2 + horz^2), pixel-wise, in place."""

    @abstractmethod
    def zero_cross(self, dest: Image, src: Image, threshold: float):
        """
        Write a binary zero-crossing map of `src` into `dest`.

        Only interior pixels can be edges. Pixel p is an edge (1.0) when a
        neighbour q among its 8 neighbours has the opposite strict sign,
        |p| <= |q| and |p - q| >= threshold; or when p == 0 and an opposite
        neighbour pair (a, b) has opposite strict signs with
        |a - b| >= threshold. Every other pixel is 0.0.
        """

    def synchronize(self):
        """Block until all submitted work is complete (no-op for sequential backends)."""

    def __repr__(self):
        return f"{type(self).__name__}()"
