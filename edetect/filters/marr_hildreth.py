#!/usr/bin/env python3
from ..backends import ConvolutionBackend, check_pair
from ..errors import ConfigurationError
from ..image import Image
from .generated import DEFAULT_RADIUS
from .laplacian import LaplacianOfGaussianFilter

DEFAULT_ZERO_CROSS_THRESHOLD = 1e-3


class MarrHildrethOperatorFilter:
    """
    Marr-Hildreth edge detector: LoG response followed by zero-crossing detection.

    Pipeline:
        1. response = LoG(radius) * src (full 2D convolution, signed)
        2. dest = zero crossings of response (1.0 edge, 0.0 elsewhere)

    A pixel is an edge when it sits on the near-zero side of a sign change
    with one of its 8 neighbours, or is exactly zero between two opposite
    neighbours of opposite sign. The contrast across the crossing must reach
    `threshold`, which rejects the float noise of uniform regions. Border
    pixels are never edges.

    Args:
        backend (ConvolutionBackend): Execution backend
        radius (int): LoG kernel radius (sigma = radius / 3)
        threshold (float): Minimum |p - q| across a crossing (>= 0)
    """
    def __init__(self, backend: ConvolutionBackend, radius: int = DEFAULT_RADIUS,
                 threshold: float = DEFAULT_ZERO_CROSS_THRESHOLD):
        self.backend = backend
        self._log = LaplacianOfGaussianFilter(backend, radius)
        self.threshold = threshold

    @property
    def radius(self) -> int:
        return self._log.radius

    @radius.setter
    def radius(self, radius: int):
        self._log.radius = radius

    @property
    def threshold(self) -> float:
        return self._threshold

    @threshold.setter
    def threshold(self, threshold: float):
        if threshold < 0:
            raise ConfigurationError(f"Zero-crossing threshold must be >= 0, got {threshold}")
        self._threshold = float(threshold)

    def apply(self, dest: Image, src: Image):
        check_pair(dest, src)
        # Signed LoG response; its zero crossings are the edges
        response = Image.like(src)
        self._log.apply(response, src)
        self.merge_edges(dest, response)

    def merge_edges(self, dest: Image, src: Image):
        """Write the zero-crossing edge map of the LoG response `src` into `dest`."""
        self.backend.zero_cross(dest, src, self._threshold)
