#!/usr/bin/env python3
from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np

from ..backends import ConvolutionBackend
from ..errors import ConfigurationError
from ..image import Image
from ..utils.common import get_logger
from ..utils.kernels import check_radius

logger = get_logger(__name__)

DEFAULT_RADIUS = 2


class GeneratedKernelFilter(ABC):
    """
    Filter whose kernel is synthesized at runtime from its radius.

    The most recently generated kernel is cached together with the radius it
    was generated for; changing `radius` only invalidates it, and the next
    `apply` (or `kernel` access) regenerates it.

    Subclasses implement:
        generate_kernel(radius) -> (kernel, length)
        create_convolution(backend) -> filter with convolve(dest, src)
        load_kernel(kernel, radius) to hand the kernel to that filter

    Args:
        backend (ConvolutionBackend): Execution backend
        radius (int): Kernel radius (>= 0)
    """
    def __init__(self, backend: ConvolutionBackend, radius: int = DEFAULT_RADIUS):
        self.backend = backend
        self._radius = check_radius(radius)
        self._kernel = None
        self._kernel_radius = None
        self._convolution = self.create_convolution(backend)

    @property
    def radius(self) -> int:
        return self._radius

    @radius.setter
    def radius(self, radius: int):
        self._radius = check_radius(radius)

    @property
    def kernel(self) -> np.ndarray:
        return self.refresh_kernel()

    def refresh_kernel(self) -> np.ndarray:
        """Return the cached kernel, regenerating it if the radius changed."""
        # Regenerate only when the radius moved since the last kernel
        if self._kernel is None or self._kernel_radius != self._radius:
            kernel, length = self.generate_kernel(self._radius)
            if length != kernel.size:
                raise ConfigurationError(
                    f"{type(self).__name__} reported length {length} for {kernel.size} weights"
                )
            self.load_kernel(kernel, self._radius)
            self._kernel, self._kernel_radius = kernel, self._radius
            logger.debug(f"{type(self).__name__}: generated kernel radius={self._radius} length={length}")
        return self._kernel

    @abstractmethod
    def generate_kernel(self, radius: int) -> Tuple[np.ndarray, int]:
        """Return the kernel for `radius` and its number of weights."""

    @abstractmethod
    def create_convolution(self, backend: ConvolutionBackend):
        """Return the convolution filter the generated kernel is loaded into."""

    def load_kernel(self, kernel: np.ndarray, radius: int):
        self._convolution.set_kernel(kernel, radius)

    def apply(self, dest: Image, src: Image):
        """Regenerate the kernel if the radius changed, then convolve `src` into `dest`."""
        self.refresh_kernel()
        self._convolution.convolve(dest, src)
