#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Optional

from ..errors import ConfigurationError
from ..utils.kernels import check_radius


@dataclass
class EdgeDetectConfig:
    """
    Configuration class for assembling edetect filters.

    Attributes:
        backend (str): Registry name of the convolution backend ("cpu", "torch", "cuda")
        device (str): Torch device used by the data-parallel backend
        radius (int): Radius of the Gaussian / Laplacian-of-Gaussian kernels
        smoothing_radius (int): Gaussian pre-smoothing radius for Sobel (0 disables it)
        zero_cross_threshold (float): Minimum contrast across a Marr-Hildreth zero crossing
        log_level (str): Level applied to the edetect loggers (None leaves it as the caller set it)
    """
    backend: str = "cpu"
    device: str = "cpu"
    radius: int = 2                     # sigma = radius / 3
    smoothing_radius: int = 0
    zero_cross_threshold: float = 1e-3
    log_level: Optional[str] = None     # e.g. "DEBUG"

    def validate(self) -> "EdgeDetectConfig":
        """Raise ConfigurationError for inconsistent values, return self otherwise."""
        from ..backends import available_backends

        check_radius(self.radius)
        check_radius(self.smoothing_radius)
        if self.zero_cross_threshold < 0:
            raise ConfigurationError(
                f"zero_cross_threshold must be >= 0, got {self.zero_cross_threshold}"
            )
        if self.backend not in available_backends():
            raise ConfigurationError(
                f"Unknown backend '{self.backend}', expected one of {available_backends()}"
            )
        return self

    def build_backend(self):
        """Instantiate the configured convolution backend."""
        from ..backends import get_backend

        self.validate()
        return get_backend(self.backend, device=self.device)
