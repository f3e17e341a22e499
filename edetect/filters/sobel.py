#!/usr/bin/env python3
from ..backends import ConvolutionBackend, check_pair
from ..image import Image
from ..utils.kernels import SOBEL_DERIVATIVE, SOBEL_RADIUS, SOBEL_SMOOTHING, check_radius
from .gaussian import GaussianBlurFilter
from .separable import SeparableConvolutionFilter


class SobelOperatorFilter:
    """
    Sobel operator: gradient magnitude from two separable 3-tap convolutions.

    - horz: rows [-1, 0, 1], columns [1, 2, 1] (d/dx)
    - vert: rows [1, 2, 1], columns [-1, 0, 1] (d/dy)
    - magnitude = sqrt(vert^2 + horz^2), written over vert

    The kernels are fixed, nothing is generated. An optional Gaussian
    pre-smoothing stage runs first when `smoothing_radius` > 0.

    Args:
        backend (ConvolutionBackend): Execution backend
        smoothing_radius (int): Radius of the Gaussian pre-smoothing (0 disables it)

    Output:
        Non-negative gradient magnitude, exactly 0 inside uniform regions.
        Pixels on the image border see the implicit zero outside the image.
    """
    def __init__(self, backend: ConvolutionBackend, smoothing_radius: int = 0):
        self.backend = backend
        self.smoothing_radius = check_radius(smoothing_radius)
        self._smoothing = GaussianBlurFilter(backend, self.smoothing_radius) if self.smoothing_radius else None
        self._horz = SeparableConvolutionFilter(backend, SOBEL_DERIVATIVE, SOBEL_SMOOTHING, SOBEL_RADIUS)
        self._vert = SeparableConvolutionFilter(backend, SOBEL_SMOOTHING, SOBEL_DERIVATIVE, SOBEL_RADIUS)

    def apply(self, dest: Image, src: Image):
        check_pair(dest, src)
        if self._smoothing is not None:
            smoothed = Image.like(src)
            self._smoothing.apply(smoothed, src)
            src = smoothed

        # d/dx into a scratch image, d/dy straight into dest
        horz = Image.like(src)
        self._horz.convolve(horz, src)
        self._vert.convolve(dest, src)
        # dest = sqrt(dest^2 + horz^2)
        self.compute_gradient(dest, horz)

    def compute_gradient(self, vert: Image, horz: Image):
        """Combine the two gradient components into a magnitude, in place in `vert`."""
        self.backend.gradient_magnitude(vert, horz)
