#!/usr/bin/env python3
import numpy as np

from ..errors import ConfigurationError

SAMPLE_SIZE = np.dtype(np.float32).itemsize
DEFAULT_ALIGNMENT = 16


def aligned_stride(columns: int, alignment: int = DEFAULT_ALIGNMENT) -> int:
    """Smallest stride (bytes) holding `columns` floats, rounded up to `alignment`."""
    if alignment <= 0 or alignment % SAMPLE_SIZE:
        raise ConfigurationError(
            f"Alignment must be a positive multiple of {SAMPLE_SIZE} bytes, got {alignment}"
        )
    tight = columns * SAMPLE_SIZE
    return -(-tight // alignment) * alignment


class Image:
    """
    Image: single-channel float32 intensity grid with padded rows.

    Samples live in one contiguous buffer of ``rows * stride`` bytes; row
    ``r`` starts ``r * stride`` bytes into it and the bytes past
    ``columns * 4`` are padding that is never exposed. The stride is an
    internal detail of this class: filters and backends reach samples only
    through the (row, col) accessor or the zero-copy view of ``as_array``.

    Args:
        rows (int): Number of rows (H)
        columns (int): Number of columns (W)
        stride (int): Bytes between consecutive rows; computed from `alignment` if None
        alignment (int): Row alignment in bytes used when `stride` is None

    Invariants:
        stride >= columns * 4 and stride % 4 == 0
    """
    def __init__(self, rows: int, columns: int, stride: int = None, alignment: int = DEFAULT_ALIGNMENT):
        if rows < 0 or columns < 0:
            raise ConfigurationError(f"Image dimensions must be >= 0, got {rows}x{columns}")
        if stride is None:
            stride = aligned_stride(columns, alignment)
        if stride < columns * SAMPLE_SIZE:
            raise ConfigurationError(
                f"Stride {stride} is smaller than a row of {columns} samples "
                f"({columns * SAMPLE_SIZE} bytes)"
            )
        if stride % SAMPLE_SIZE:
            raise ConfigurationError(f"Stride must be a multiple of {SAMPLE_SIZE} bytes, got {stride}")

        self._rows = int(rows)
        self._columns = int(columns)
        self._stride = int(stride)
        # [rows, stride/4] backing store; the view hides the padding columns
        self._buffer = np.zeros((self._rows, self._stride // SAMPLE_SIZE), dtype=np.float32)
        self._view = self._buffer[:, :self._columns]

    @classmethod
    def from_array(cls, array, alignment: int = DEFAULT_ALIGNMENT) -> "Image":
        """Copy a 2D array (any real dtype) into a freshly allocated image."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ConfigurationError(f"Expected a 2D array, got shape {array.shape}")
        image = cls(array.shape[0], array.shape[1], alignment=alignment)
        image._view[...] = array
        return image

    @classmethod
    def like(cls, other: "Image") -> "Image":
        """Zero-filled image with the dimensions and stride of `other`."""
        return cls(other.rows, other.columns, stride=other.stride)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def stride(self) -> int:
        return self._stride

    @property
    def shape(self):
        return (self._rows, self._columns)

    def same_size(self, other: "Image") -> bool:
        return self.shape == other.shape

    def _check_index(self, row: int, col: int):
        if not (0 <= row < self._rows and 0 <= col < self._columns):
            raise IndexError(
                f"Sample ({row}, {col}) outside {self._rows}x{self._columns} image"
            )

    def __getitem__(self, index) -> np.float32:
        row, col = index
        self._check_index(row, col)
        return self._buffer[row, col]

    def __setitem__(self, index, value):
        row, col = index
        self._check_index(row, col)
        self._buffer[row, col] = value

    def as_array(self) -> np.ndarray:
        """Zero-copy [rows, columns] view of the samples (writes go to the image)."""
        return self._view

    def fill(self, value: float) -> "Image":
        self._view[...] = value
        return self

    def copy(self) -> "Image":
        image = Image.like(self)
        image._view[...] = self._view
        return image

    def __repr__(self):
        return f"Image(rows={self._rows}, columns={self._columns}, stride={self._stride})"
