#!/usr/bin/env python3
"""
Kernel generation for the edetect filters.

All builders work in float64 torch tensors and hand back read-only
float32 numpy arrays, which is the kernel format every backend accepts.

Sigma is derived from the radius with the fixed mapping
``sigma = radius * SIGMA_PER_RADIUS`` (radius / 3), so the kernel support
covers +/- 3 sigma. The mapping never changes between calls.
"""
import math
import numbers

import numpy as np
import torch

from ..errors import ConfigurationError

SIGMA_PER_RADIUS = 1.0 / 3.0

# Fixed 3-tap Sobel factors: central difference and [1 2 1] smoothing
SOBEL_DERIVATIVE = (-1.0, 0.0, 1.0)
SOBEL_SMOOTHING = (1.0, 2.0, 1.0)
SOBEL_RADIUS = 1


def check_radius(radius) -> int:
    """Validate a kernel radius and return it as a plain int."""
    if isinstance(radius, bool) or not isinstance(radius, numbers.Integral):
        raise ConfigurationError(f"Kernel radius must be an integer, got {radius!r}")
    if radius < 0:
        raise ConfigurationError(f"Kernel radius must be >= 0, got {radius}")
    return int(radius)


def kernel_length(radius: int) -> int:
    return 2 * radius + 1


def sigma_for_radius(radius: int) -> float:
    """Gaussian standard deviation used for a kernel of the given radius."""
    return check_radius(radius) * SIGMA_PER_RADIUS


def as_kernel(weights) -> np.ndarray:
    """Copy weights into a read-only float32 array."""
    kernel = np.array(weights, dtype=np.float32)
    kernel.setflags(write=False)
    return kernel


def gaussian_kernel_1d(radius: int) -> np.ndarray:
    """
    Discrete, normalized 1D Gaussian kernel.

    Args:
        radius (int): Kernel half-width (length is 2*radius+1)

    Returns:
        np.ndarray [2r+1] float32 - w[i] = exp(-(i-r)^2 / (2 sigma^2)), summing to 1

    Radius 0 degenerates to the identity kernel [1.0].
    """
    radius = check_radius(radius)
    if radius == 0:
        return as_kernel([1.0])

    sigma = sigma_for_radius(radius)
    ax = torch.arange(-radius, radius + 1, dtype=torch.float64)
    kernel = torch.exp(-(ax**2) / (2 * sigma**2))
    return as_kernel((kernel / kernel.sum()).numpy())


def log_kernel_2d(radius: int) -> np.ndarray:
    """
    Laplacian-of-Gaussian kernel for zero-crossing edge detection.

    Args:
        radius (int): Kernel half-width (shape is [2r+1, 2r+1])

    Returns:
        np.ndarray [2r+1, 2r+1] float32 - zero-mean LoG weights

    Uses LoG(x,y) = -1/(pi sigma^4) * (1 - r^2/(2 sigma^2)) * exp(-r^2/(2 sigma^2))
    with r^2 = x^2 + y^2. The truncated kernel is shifted to zero mean, so
    a uniform region produces no response. Radius 0 gives the single weight 0.
    """
    radius = check_radius(radius)
    if radius == 0:
        return as_kernel([[0.0]])

    sigma = sigma_for_radius(radius)
    ax = torch.arange(-radius, radius + 1, dtype=torch.float64)
    yy, xx = torch.meshgrid(ax, ax, indexing="ij")
    rr = (xx**2 + yy**2) / (2 * sigma**2)
    kernel = -(1.0 / (math.pi * sigma**4)) * (1.0 - rr) * torch.exp(-rr)
    kernel = kernel - kernel.mean()
    return as_kernel(kernel.numpy())


def box_kernel_2d(radius: int) -> np.ndarray:
    """Uniform averaging kernel, every weight 1/(2r+1)^2."""
    n = kernel_length(check_radius(radius))
    return as_kernel(np.full((n, n), 1.0 / (n * n)))
