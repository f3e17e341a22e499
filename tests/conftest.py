"""
Pytest configuration and shared fixtures for edetect tests.
"""

import numpy as np
import pytest
import torch

from edetect import Image, get_backend

BACKENDS = ["cpu", "torch"]


def seed_everything(seed: int = 0):
    """Seed numpy and torch so generated test images are reproducible."""
    np.random.seed(seed)
    torch.manual_seed(seed)


@pytest.fixture(params=BACKENDS)
def backend(request):
    """Every registered backend that runs without special hardware."""
    return get_backend(request.param)


@pytest.fixture
def cpu_backend():
    return get_backend("cpu")


@pytest.fixture
def torch_backend():
    return get_backend("torch")


@pytest.fixture
def random_image():
    """Seeded 9x11 image with values in [0, 1)."""
    seed_everything(0)
    return Image.from_array(np.random.rand(9, 11))


@pytest.fixture
def step_image():
    """Factory for a step edge: left of `step` is 0, from `step` on it is 1."""
    def make(rows=32, columns=32, step=16):
        data = np.zeros((rows, columns), dtype=np.float32)
        data[:, step:] = 1.0
        return Image.from_array(data)
    return make


@pytest.fixture
def reference_convolve():
    """Float64 convolution with explicit zero padding, used as ground truth."""
    def convolve(array, kernel):
        array = np.asarray(array, dtype=np.float64)
        kernel = np.asarray(kernel, dtype=np.float64)
        ry, rx = kernel.shape[0] // 2, kernel.shape[1] // 2
        rows, cols = array.shape
        padded = np.pad(array, ((ry, ry), (rx, rx)))
        out = np.zeros_like(array)
        for i in range(kernel.shape[0]):
            for j in range(kernel.shape[1]):
                out += padded[i:i + rows, j:j + cols] * kernel[i, j]
        return out
    return convolve
