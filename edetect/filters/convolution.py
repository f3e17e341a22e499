#!/usr/bin/env python3
import numpy as np

from ..backends import ConvolutionBackend, check_pair
from ..errors import ConfigurationError
from ..image import Image
from ..utils.kernels import as_kernel, check_radius, kernel_length


def validate_kernel(kernel, radius, ndim: int):
    """
    Check a kernel against its radius and return (read-only float32 copy, radius).

    Args:
        kernel: array-like of weights, [2R+1] for ndim=1 or [2R+1, 2R+1] for ndim=2
        radius (int | None): Kernel radius; inferred from the kernel when None
        ndim (int): Expected number of kernel dimensions

    Raises:
        ConfigurationError: wrong dimensionality, even length or length/radius mismatch
    """
    kernel = as_kernel(kernel)
    if kernel.ndim != ndim:
        raise ConfigurationError(f"Expected a {ndim}D kernel, got shape {kernel.shape}")
    if radius is None:
        if kernel.shape[0] % 2 == 0:
            raise ConfigurationError(f"Kernel length must be odd, got shape {kernel.shape}")
        radius = kernel.shape[0] // 2
    radius = check_radius(radius)
    expected = (kernel_length(radius),) * ndim
    if kernel.shape != expected:
        raise ConfigurationError(
            f"Kernel of radius {radius} must have shape {expected}, got {kernel.shape}"
        )
    return kernel, radius


class ConvolutionFilter:
    """
    Full 2D convolution with a square [2R+1, 2R+1] kernel.

    Computes dest[r][c] = sum_{i,j} src[r+i-R][c+j-R] * kernel[i][j] over the
    taps that fall inside the source; taps outside the image contribute
    nothing. The work itself is done by the backend.

    Args:
        backend (ConvolutionBackend): Execution backend
        kernel: Optional initial kernel
        radius (int): Optional kernel radius (inferred from the kernel if None)
    """
    ndim = 2

    def __init__(self, backend: ConvolutionBackend, kernel=None, radius: int = None):
        self.backend = backend
        self._kernel = None
        self._radius = None
        if kernel is not None:
            self.set_kernel(kernel, radius)

    @property
    def kernel(self) -> np.ndarray:
        return self._kernel

    @property
    def radius(self) -> int:
        return self._radius

    def set_kernel(self, kernel, radius: int = None):
        self._kernel, self._radius = validate_kernel(kernel, radius, self.ndim)

    def convolve(self, dest: Image, src: Image):
        """Convolve `src` into the distinct, equally sized image `dest`."""
        if self._kernel is None:
            raise ConfigurationError(f"{type(self).__name__} has no kernel set")
        check_pair(dest, src)
        self._run(dest, src)

    def apply(self, dest: Image, src: Image):
        self.convolve(dest, src)

    def _run(self, dest: Image, src: Image):
        self.backend.convolve_2d(dest, src, self._kernel, self._radius)


class RowConvolutionFilter(ConvolutionFilter):
    """1D convolution along rows; the horizontal pass of a separable filter."""
    ndim = 1

    def _run(self, dest: Image, src: Image):
        self.backend.convolve_rows(dest, src, self._kernel, self._radius)


class ColumnConvolutionFilter(ConvolutionFilter):
    """1D convolution along columns; the vertical pass of a separable filter."""
    ndim = 1

    def _run(self, dest: Image, src: Image):
        self.backend.convolve_columns(dest, src, self._kernel, self._radius)
