"""Tests for the Sobel operator."""

import numpy as np
import pytest

from edetect import DimensionMismatch, Image, SobelOperatorFilter
from edetect.utils.kernels import SOBEL_DERIVATIVE, SOBEL_SMOOTHING


def test_magnitude_is_non_negative(backend, random_image):
    dest = Image.like(random_image)
    SobelOperatorFilter(backend).apply(dest, random_image)
    assert np.all(dest.as_array() >= 0)


def test_zero_image_has_zero_gradient(backend):
    src = Image(6, 7)
    dest = Image.like(src).fill(5.0)
    SobelOperatorFilter(backend).apply(dest, src)
    assert not dest.as_array().any()


def test_uniform_interior_is_exactly_zero(backend):
    src = Image(7, 6).fill(0.5)
    dest = Image.like(src)
    SobelOperatorFilter(backend).apply(dest, src)
    out = dest.as_array()
    assert np.all(out[1:-1, 1:-1] == 0.0)
    # border pixels see the implicit zero outside the image
    assert np.all(out[0, :] > 0)
    assert np.all(out[:, -1] > 0)


def test_vertical_step_edge(backend):
    data = np.zeros((8, 8), dtype=np.float32)
    data[:, 4:] = 1.0
    src = Image.from_array(data)
    dest = Image.like(src)
    SobelOperatorFilter(backend).apply(dest, src)
    out = dest.as_array()
    # [-1 0 1] across the step gives 1, [1 2 1] down the column gives 4
    assert np.all(out[1:-1, 3:5] == 4.0)
    assert np.all(out[1:-1, [1, 2, 5, 6]] == 0.0)


def test_gradient_combination(backend):
    vert = Image.from_array([[3.0, 0.0], [-5.0, 1.0]])
    horz = Image.from_array([[4.0, 0.0], [12.0, -1.0]])
    SobelOperatorFilter(backend).compute_gradient(vert, horz)
    np.testing.assert_allclose(vert.as_array(), [[5.0, 0.0], [13.0, np.sqrt(2.0)]], rtol=1e-6)
    np.testing.assert_array_equal(horz.as_array(), [[4.0, 0.0], [12.0, -1.0]])


def test_matches_reference(backend, random_image, reference_convolve):
    dest = Image.like(random_image)
    SobelOperatorFilter(backend).apply(dest, random_image)
    d, s = np.array(SOBEL_DERIVATIVE), np.array(SOBEL_SMOOTHING)
    horz = reference_convolve(random_image.as_array(), np.outer(s, d))
    vert = reference_convolve(random_image.as_array(), np.outer(d, s))
    np.testing.assert_allclose(dest.as_array(), np.hypot(horz, vert), rtol=1e-5, atol=1e-5)


def test_smoothing_reduces_noise_response(backend, random_image):
    raw = Image.like(random_image)
    SobelOperatorFilter(backend).apply(raw, random_image)
    smoothed = Image.like(random_image)
    SobelOperatorFilter(backend, smoothing_radius=2).apply(smoothed, random_image)
    interior = (slice(3, -3), slice(3, -3))
    assert smoothed.as_array()[interior].mean() < raw.as_array()[interior].mean()


def test_dimension_mismatch(backend, random_image):
    dest = Image(2, 2).fill(1.0)
    with pytest.raises(DimensionMismatch):
        SobelOperatorFilter(backend).apply(dest, random_image)
    assert np.all(dest.as_array() == 1.0)
