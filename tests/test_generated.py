"""Tests for generated-kernel filters (Gaussian blur, Laplacian of Gaussian)."""

import logging

import numpy as np
import pytest

from edetect import (
    ConfigurationError,
    GaussianBlurFilter,
    GeneratedKernelFilter,
    Image,
    LaplacianOfGaussianFilter,
)
from edetect.filters.convolution import ConvolutionFilter
from edetect.utils.kernels import gaussian_kernel_1d, log_kernel_2d


class TestKernelCache:
    def test_kernel_generated_lazily_and_cached(self, cpu_backend):
        blur = GaussianBlurFilter(cpu_backend, radius=2)
        first = blur.kernel
        assert first is blur.kernel
        assert first.shape == (5,)

    def test_kernel_regenerated_on_radius_change(self, cpu_backend):
        blur = GaussianBlurFilter(cpu_backend, radius=2)
        first = blur.kernel
        blur.radius = 3
        second = blur.kernel
        assert second is not first
        assert second.shape == (7,)
        blur.radius = 3
        assert blur.kernel is second

    def test_invalid_radius_rejected(self, cpu_backend):
        with pytest.raises(ConfigurationError):
            GaussianBlurFilter(cpu_backend, radius=-1)
        blur = GaussianBlurFilter(cpu_backend, radius=1)
        with pytest.raises(ConfigurationError):
            blur.radius = -3
        assert blur.radius == 1

    def test_reported_length_must_match(self, cpu_backend):
        class BrokenFilter(GeneratedKernelFilter):
            def generate_kernel(self, radius):
                return gaussian_kernel_1d(radius), 1

            def create_convolution(self, backend):
                return ConvolutionFilter(backend)

        with pytest.raises(ConfigurationError):
            BrokenFilter(cpu_backend, radius=1).kernel

    def test_generation_is_logged(self, cpu_backend, caplog):
        caplog.set_level(logging.DEBUG, logger="edetect")
        GaussianBlurFilter(cpu_backend, radius=1).kernel
        assert "generated kernel radius=1 length=3" in caplog.text


class TestGaussianBlur:
    def test_radius_zero_is_identity(self, backend, random_image):
        dest = Image.like(random_image)
        GaussianBlurFilter(backend, radius=0).apply(dest, random_image)
        np.testing.assert_array_equal(dest.as_array(), random_image.as_array())

    def test_matches_2d_gaussian(self, backend, random_image, reference_convolve):
        dest = Image.like(random_image)
        GaussianBlurFilter(backend, radius=2).apply(dest, random_image)
        g = gaussian_kernel_1d(2)
        expected = reference_convolve(random_image.as_array(), np.outer(g, g))
        np.testing.assert_allclose(dest.as_array(), expected, rtol=1e-5, atol=1e-6)

    def test_preserves_uniform_interior(self, backend):
        src = Image(9, 9).fill(0.5)
        dest = Image.like(src)
        GaussianBlurFilter(backend, radius=2).apply(dest, src)
        np.testing.assert_allclose(dest.as_array()[2:-2, 2:-2], 0.5, rtol=1e-6)
        # implicit zero outside the image darkens the border
        assert dest[0, 0] < 0.5

    def test_radius_change_between_calls(self, backend, random_image):
        blur = GaussianBlurFilter(backend, radius=1)
        first = Image.like(random_image)
        blur.apply(first, random_image)
        blur.radius = 0
        second = Image.like(random_image)
        blur.apply(second, random_image)
        np.testing.assert_array_equal(second.as_array(), random_image.as_array())
        assert not np.array_equal(first.as_array(), second.as_array())


class TestLaplacianOfGaussian:
    def test_uses_2d_kernel(self, cpu_backend):
        log = LaplacianOfGaussianFilter(cpu_backend, radius=2)
        kernel = log.kernel
        assert kernel.shape == (5, 5)
        np.testing.assert_array_equal(kernel, log_kernel_2d(2))

    def test_uniform_interior_response_is_zero(self, backend):
        src = Image(9, 9).fill(1.0)
        dest = Image.like(src)
        LaplacianOfGaussianFilter(backend, radius=2).apply(dest, src)
        np.testing.assert_allclose(dest.as_array()[2:-2, 2:-2], 0.0, atol=1e-5)

    def test_matches_reference(self, backend, random_image, reference_convolve):
        dest = Image.like(random_image)
        LaplacianOfGaussianFilter(backend, radius=2).apply(dest, random_image)
        expected = reference_convolve(random_image.as_array(), log_kernel_2d(2))
        np.testing.assert_allclose(dest.as_array(), expected, rtol=1e-4, atol=1e-5)

    def test_radius_zero_does_not_fail(self, backend, random_image):
        dest = Image.like(random_image).fill(3.0)
        LaplacianOfGaussianFilter(backend, radius=0).apply(dest, random_image)
        assert not dest.as_array().any()
