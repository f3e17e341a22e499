#!/usr/bin/env python3
from ..utils.kernels import log_kernel_2d
from .convolution import ConvolutionFilter
from .generated import GeneratedKernelFilter


class LaplacianOfGaussianFilter(GeneratedKernelFilter):
    """
    Laplacian-of-Gaussian response through the full 2D convolution path.

    The LoG kernel does not factor into an outer product of 1D kernels, so
    it uses ConvolutionFilter rather than the separable composition. The
    zero-mean kernel leaves uniform regions at (near) zero and produces a
    signed response whose zero crossings mark intensity edges.
    """
    def generate_kernel(self, radius: int):
        kernel = log_kernel_2d(radius)
        return kernel, kernel.size

    def create_convolution(self, backend):
        return ConvolutionFilter(backend)
