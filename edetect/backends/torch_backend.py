#!/usr/bin/env python3
from contextlib import contextmanager

import numpy as np
import torch
import torch.nn.functional as F

from ..errors import BackendFailure
from ..image import Image
from ..utils.common import get_logger
from .base import ConvolutionBackend, NEIGHBOURS, OPPOSITE_PAIRS, check_pair

logger = get_logger(__name__)


class TorchBackend(ConvolutionBackend):
    """
    Data-parallel backend evaluating every output pixel at once with torch.

    Each pass is a single F.conv2d over the image viewed as a [1, 1, H, W]
    batch. conv2d computes a cross-correlation, which is exactly

        dest[r][c] = sum_{i,j} src[r+i-R][c+j-R] * kernel[i][j]

    and its zero padding of R samples per side means out-of-range taps add
    nothing, so the result matches the sequential backend. Row and column
    passes use [1, 2R+1] and [2R+1, 1] kernels padded along one axis only.

    Args:
        device (str | torch.device): Device the passes run on ("cpu", "cuda", "cuda:1", ...)

    Raises:
        BackendFailure: when the requested device is not available
    """
    name = "torch"

    def __init__(self, device="cpu"):
        self.device = torch.device(device)
        if self.device.type == "cuda" and not torch.cuda.is_available():
            raise BackendFailure(self.name, f"Device '{self.device}' requested but CUDA is not available")
        logger.debug(f"TorchBackend on {self.device}")

    @contextmanager
    def _guard(self):
        # Allocation and transfer failures are fatal to the current pass
        try:
            yield
        except RuntimeError as e:
            raise BackendFailure(self.name, f"Pass failed on {self.device}: {e}") from e

    def synchronize(self):
        if self.device.type == "cuda":
            torch.cuda.synchronize(self.device)

    def _load(self, image: Image) -> torch.Tensor:
        return torch.from_numpy(image.as_array()).to(self.device)

    def _kernel(self, kernel: np.ndarray, *shape) -> torch.Tensor:
        # kernels are read-only arrays; torch needs a writable copy
        k = torch.from_numpy(np.array(kernel, dtype=np.float32)).to(self.device)
        return k.view(1, 1, *shape)  # [out_ch, in_ch, kH, kW] for conv2d

    def _store(self, dest: Image, result: torch.Tensor):
        # Results must be on the host before dest is touched
        self.synchronize()
        dest.as_array()[...] = result.cpu().numpy()

    def _conv(self, dest: Image, src: Image, kernel: np.ndarray, shape, padding):
        check_pair(dest, src)
        if src.rows == 0 or src.columns == 0:
            # conv2d rejects a padded input smaller than the kernel; nothing to write anyway
            return
        with self._guard():
            x = self._load(src)[None, None]  # [H, W] -> [1, 1, H, W]
            k = self._kernel(kernel, *shape)
            y = F.conv2d(x, k, padding=padding)
            self._store(dest, y[0, 0])

    def convolve_2d(self, dest: Image, src: Image, kernel: np.ndarray, radius: int):
        length = 2 * radius + 1
        self._conv(dest, src, kernel, (length, length), radius)

    def convolve_rows(self, dest: Image, src: Image, kernel: np.ndarray, radius: int):
        # Horizontal taps only: pad the columns, never the rows
        self._conv(dest, src, kernel, (1, 2 * radius + 1), (0, radius))

    def convolve_columns(self, dest: Image, src: Image, kernel: np.ndarray, radius: int):
        self._conv(dest, src, kernel, (2 * radius + 1, 1), (radius, 0))

    def gradient_magnitude(self, vert: Image, horz: Image):
        check_pair(vert, horz)
        if vert.rows == 0 or vert.columns == 0:
            return
        with self._guard():
            v = self._load(vert)
            h = self._load(horz)
            # Magnitude overwrites the vertical component in place
            self._store(vert, torch.sqrt(v * v + h * h))

    def zero_cross(self, dest: Image, src: Image, threshold: float):
        check_pair(dest, src)
        rows, cols = src.shape
        # Border pixels are never edges, so without an interior there is nothing to test
        if rows < 3 or cols < 3:
            dest.fill(0.0)
            return

        with self._guard():
            s = self._load(src)
            thr = torch.tensor(threshold, dtype=torch.float32, device=self.device)

            # Interior window moved by (dr, dc); shifted(0, 0) is the centre pixel p
            def shifted(dr, dc):
                return s[1 + dr:rows - 1 + dr, 1 + dc:cols - 1 + dc]

            # Strict sign change; zero is neither positive nor negative
            def opposite(a, b):
                return ((a > 0) & (b < 0)) | ((a < 0) & (b > 0))

            p = shifted(0, 0)
            edges = torch.zeros_like(p, dtype=torch.bool)
            for dr, dc in NEIGHBOURS:
                q = shifted(dr, dc)
                # p is on the side of the crossing nearer to zero
                edges |= opposite(p, q) & (p.abs() <= q.abs()) & ((p - q).abs() >= thr)

            # An exact zero sits on the crossing between two opposite neighbours
            at_zero = p == 0
            for (ar, ac), (br, bc) in OPPOSITE_PAIRS:
                a, b = shifted(ar, ac), shifted(br, bc)
                edges |= at_zero & opposite(a, b) & ((a - b).abs() >= thr)

            # Binary map: interior from the tests above, border left at 0
            out = torch.zeros_like(s)
            out[1:rows - 1, 1:cols - 1] = edges.to(s.dtype)
            self._store(dest, out)

    def __repr__(self):
        return f"TorchBackend(device='{self.device}')"
