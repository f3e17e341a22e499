from .convolution import ConvolutionFilter, RowConvolutionFilter, ColumnConvolutionFilter
from .separable import SeparableConvolutionFilter
from .generated import GeneratedKernelFilter, DEFAULT_RADIUS
from .gaussian import GaussianBlurFilter
from .laplacian import LaplacianOfGaussianFilter
from .sobel import SobelOperatorFilter
from .marr_hildreth import MarrHildrethOperatorFilter, DEFAULT_ZERO_CROSS_THRESHOLD
from .factory import create_filter, FILTERS

__all__ = [
    'ConvolutionFilter', 'RowConvolutionFilter', 'ColumnConvolutionFilter',
    'SeparableConvolutionFilter', 'GeneratedKernelFilter', 'GaussianBlurFilter',
    'LaplacianOfGaussianFilter', 'SobelOperatorFilter', 'MarrHildrethOperatorFilter',
    'create_filter', 'FILTERS', 'DEFAULT_RADIUS', 'DEFAULT_ZERO_CROSS_THRESHOLD'
]
