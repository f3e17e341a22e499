#!/usr/bin/env python3
from ..backends import ConvolutionBackend, check_pair
from ..errors import ConfigurationError
from ..image import Image
from .convolution import ColumnConvolutionFilter, RowConvolutionFilter, validate_kernel


class SeparableConvolutionFilter:
    """
    Separable 2D convolution: a row pass followed by a column pass.

    For K = outer(column_kernel, row_kernel) this matches ConvolutionFilter
    with K up to float rounding, at O(R) instead of O(R^2) work per pixel.
    The row pass writes into an intermediate image allocated per call, so
    the column pass never reads from the image it writes.

    Args:
        backend (ConvolutionBackend): Execution backend
        row_kernel: Optional [2R+1] kernel applied along rows
        column_kernel: Optional [2R+1] kernel applied along columns
        radius (int): Optional shared radius of both kernels
    """
    def __init__(self, backend: ConvolutionBackend, row_kernel=None, column_kernel=None, radius: int = None):
        self.backend = backend
        self.rows = RowConvolutionFilter(backend)
        self.columns = ColumnConvolutionFilter(backend)
        if row_kernel is not None or column_kernel is not None:
            self.set_kernels(row_kernel, column_kernel, radius)

    @property
    def radius(self) -> int:
        return self.rows.radius

    def set_kernels(self, row_kernel, column_kernel, radius: int = None):
        """Replace both kernels, or neither if either one is rejected."""
        if row_kernel is None or column_kernel is None:
            raise ConfigurationError("Separable filter needs both a row and a column kernel")
        row_kernel, row_radius = validate_kernel(row_kernel, radius, RowConvolutionFilter.ndim)
        column_kernel, column_radius = validate_kernel(column_kernel, radius, ColumnConvolutionFilter.ndim)
        if row_radius != column_radius:
            raise ConfigurationError(
                f"Row radius {row_radius} differs from column radius {column_radius}"
            )
        # Both kernels are valid and agree; only now touch the passes
        self.rows.set_kernel(row_kernel, row_radius)
        self.columns.set_kernel(column_kernel, column_radius)

    def convolve(self, dest: Image, src: Image):
        check_pair(dest, src)
        # Row pass into a scratch image, column pass from it into dest
        temp = Image.like(src)
        self.rows.convolve(temp, src)
        self.columns.convolve(dest, temp)

    def apply(self, dest: Image, src: Image):
        self.convolve(dest, src)
