"""Tests for kernel generation."""

import numpy as np
import pytest

from edetect import ConfigurationError
from edetect.utils.kernels import (
    SIGMA_PER_RADIUS,
    box_kernel_2d,
    check_radius,
    gaussian_kernel_1d,
    log_kernel_2d,
    sigma_for_radius,
)


@pytest.mark.parametrize("radius", [1, 2, 3, 5, 8])
def test_gaussian_length_symmetry_and_sum(radius):
    kernel = gaussian_kernel_1d(radius)
    assert kernel.dtype == np.float32
    assert kernel.shape == (2 * radius + 1,)
    for i in range(2 * radius + 1):
        assert kernel[i] == kernel[2 * radius - i]
    assert kernel.sum() == pytest.approx(1.0, abs=1e-6)


def test_gaussian_peaks_at_center():
    kernel = gaussian_kernel_1d(3)
    assert kernel.argmax() == 3
    assert np.all(np.diff(kernel[:4]) > 0)


def test_gaussian_matches_formula():
    radius = 3
    sigma = radius / 3.0
    i = np.arange(2 * radius + 1)
    expected = np.exp(-((i - radius) ** 2) / (2 * sigma ** 2))
    expected /= expected.sum()
    np.testing.assert_allclose(gaussian_kernel_1d(radius), expected, rtol=1e-6)


def test_gaussian_radius_zero_is_identity():
    np.testing.assert_array_equal(gaussian_kernel_1d(0), [1.0])


def test_gaussian_is_deterministic():
    np.testing.assert_array_equal(gaussian_kernel_1d(4), gaussian_kernel_1d(4))


def test_sigma_mapping():
    assert SIGMA_PER_RADIUS == pytest.approx(1.0 / 3.0)
    assert sigma_for_radius(6) == pytest.approx(2.0)
    assert sigma_for_radius(0) == 0.0


def test_kernels_are_read_only():
    kernel = gaussian_kernel_1d(2)
    with pytest.raises(ValueError):
        kernel[0] = 1.0


@pytest.mark.parametrize("radius", [1, 2, 4])
def test_log_kernel_shape_symmetry_and_zero_mean(radius):
    kernel = log_kernel_2d(radius)
    n = 2 * radius + 1
    assert kernel.shape == (n, n)
    np.testing.assert_allclose(kernel, kernel.T, atol=1e-7)
    np.testing.assert_allclose(kernel, kernel[::-1, ::-1], atol=1e-7)
    assert abs(float(kernel.astype(np.float64).sum())) < 1e-4
    # negative center, positive surround
    assert kernel[radius, radius] < 0
    assert kernel[0, radius] > 0


def test_log_radius_zero():
    np.testing.assert_array_equal(log_kernel_2d(0), [[0.0]])


def test_box_kernel():
    kernel = box_kernel_2d(1)
    assert kernel.shape == (3, 3)
    np.testing.assert_allclose(kernel, np.full((3, 3), 1.0 / 9.0))


@pytest.mark.parametrize("radius", [-1, 1.5, "2", True, None])
def test_invalid_radius_rejected(radius):
    with pytest.raises(ConfigurationError):
        check_radius(radius)


def test_numpy_integer_radius_accepted():
    assert check_radius(np.int64(3)) == 3
