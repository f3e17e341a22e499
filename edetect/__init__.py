from .errors import EdgeDetectError, ConfigurationError, DimensionMismatch, BackendFailure
from .image import Image
from .config import EdgeDetectConfig
from .backends import ConvolutionBackend, CpuBackend, TorchBackend, get_backend, available_backends
from .filters import (
    ConvolutionFilter,
    RowConvolutionFilter,
    ColumnConvolutionFilter,
    SeparableConvolutionFilter,
    GeneratedKernelFilter,
    GaussianBlurFilter,
    LaplacianOfGaussianFilter,
    SobelOperatorFilter,
    MarrHildrethOperatorFilter,
    create_filter,
)

__version__ = "0.1.0"

__all__ = [
    'Image',
    'EdgeDetectConfig',
    'EdgeDetectError',
    'ConfigurationError',
    'DimensionMismatch',
    'BackendFailure',
    'ConvolutionBackend',
    'CpuBackend',
    'TorchBackend',
    'get_backend',
    'available_backends',
    'ConvolutionFilter',
    'RowConvolutionFilter',
    'ColumnConvolutionFilter',
    'SeparableConvolutionFilter',
    'GeneratedKernelFilter',
    'GaussianBlurFilter',
    'LaplacianOfGaussianFilter',
    'SobelOperatorFilter',
    'MarrHildrethOperatorFilter',
    'create_filter',
]
