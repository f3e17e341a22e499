#!/usr/bin/env python3
import numpy as np

from ..image import Image
from .base import ConvolutionBackend, NEIGHBOURS, OPPOSITE_PAIRS, check_pair


def _window(position: int, radius: int, extent: int):
    """
    Valid tap range [start, end) of a kernel centred at `position`.

    Taps before `start` fall before the image, taps from `end` on fall past
    its end; both bands are skipped instead of bounds-checked per sample.
    """
    start = radius - position if position < radius else 0
    end = extent - position + radius if extent <= position + radius else 2 * radius + 1
    return start, end


def _opposite(a, b) -> bool:
    return (a > 0 and b < 0) or (a < 0 and b > 0)


class CpuBackend(ConvolutionBackend):
    """
    Sequential backend: one scalar float32 multiply-accumulate per tap.

    Walks every output pixel in row-major order and sums only the kernel
    taps whose source sample lies inside the image.
    """
    name = "cpu"

    def convolve_2d(self, dest: Image, src: Image, kernel: np.ndarray, radius: int):
        check_pair(dest, src)
        s, d = src.as_array(), dest.as_array()
        rows, cols = src.shape

        for row in range(rows):
            # Kernel rows whose source row lies inside the image
            rstart, rend = _window(row, radius, rows)
            for col in range(cols):
                cstart, cend = _window(col, radius, cols)
                x = np.float32(0.0)  # float32 accumulator, taps summed in row-major order
                for i in range(rstart, rend):
                    srow = s[row + i - radius]
                    krow = kernel[i]
                    for j in range(cstart, cend):
                        x += srow[col + j - radius] * krow[j]
                # Skipped taps contribute nothing (implicit zero border)
                d[row, col] = x

    def convolve_rows(self, dest: Image, src: Image, kernel: np.ndarray, radius: int):
        check_pair(dest, src)
        s, d = src.as_array(), dest.as_array()
        rows, cols = src.shape

        for row in range(rows):
            srow = s[row]
            for col in range(cols):
                # Only taps that land on a column of this row
                start, end = _window(col, radius, cols)
                x = np.float32(0.0)
                for k in range(start, end):
                    x += srow[col + k - radius] * kernel[k]
                d[row, col] = x

    def convolve_columns(self, dest: Image, src: Image, kernel: np.ndarray, radius: int):
        check_pair(dest, src)
        s, d = src.as_array(), dest.as_array()
        rows, cols = src.shape

        for row in range(rows):
            # Valid tap band for this row, shared by every column
            start, end = _window(row, radius, rows)
            for col in range(cols):
                x = np.float32(0.0)
                for k in range(start, end):
                    x += s[row + k - radius, col] * kernel[k]
                d[row, col] = x

    def gradient_magnitude(self, vert: Image, horz: Image):
        check_pair(vert, horz)
        v, h = vert.as_array(), horz.as_array()
        rows, cols = vert.shape

        for row in range(rows):
            for col in range(cols):
                a, b = v[row, col], h[row, col]
                # Overwrites the vertical component in place
                v[row, col] = np.sqrt(a * a + b * b)

    def zero_cross(self, dest: Image, src: Image, threshold: float):
        check_pair(dest, src)
        s, d = src.as_array(), dest.as_array()
        rows, cols = src.shape
        threshold = np.float32(threshold)

        # Every pixel is written: borders stay 0, interior is 0 or 1
        d[...] = 0.0
        for row in range(1, rows - 1):
            for col in range(1, cols - 1):
                if self._is_crossing(s, row, col, threshold):
                    d[row, col] = 1.0

    @staticmethod
    def _is_crossing(s: np.ndarray, row: int, col: int, threshold) -> bool:
        p = s[row, col]
        # p is an edge when it is the near-zero side of a sign change
        for dr, dc in NEIGHBOURS:
            q = s[row + dr, col + dc]
            if _opposite(p, q) and abs(p) <= abs(q) and abs(p - q) >= threshold:
                return True
        # An exact zero between two opposite neighbours of different sign
        if p == 0:
            for (ar, ac), (br, bc) in OPPOSITE_PAIRS:
                a, b = s[row + ar, col + ac], s[row + br, col + bc]
                if _opposite(a, b) and abs(a - b) >= threshold:
                    return True
        return False
