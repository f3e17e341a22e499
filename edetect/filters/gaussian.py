#!/usr/bin/env python3
from ..utils.kernels import gaussian_kernel_1d
from .generated import GeneratedKernelFilter
from .separable import SeparableConvolutionFilter


class GaussianBlurFilter(GeneratedKernelFilter):
    """
    Gaussian blur applied as two separable 1D passes.

    Kernel: w[i] = exp(-(i-R)^2 / (2 sigma^2)), normalized to sum 1, with
    sigma = R / 3. The same kernel runs along rows and then columns.
    Radius 0 is the identity filter.
    """
    def generate_kernel(self, radius: int):
        kernel = gaussian_kernel_1d(radius)
        return kernel, kernel.size

    def create_convolution(self, backend):
        return SeparableConvolutionFilter(backend)

    def load_kernel(self, kernel, radius: int):
        # Gaussian is symmetric in x and y: one kernel for both passes
        self._convolution.set_kernels(kernel, kernel, radius)
