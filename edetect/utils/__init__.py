from .common import get_logger, configure_logging
from .kernels import (
    SIGMA_PER_RADIUS, check_radius, sigma_for_radius, gaussian_kernel_1d,
    log_kernel_2d, box_kernel_2d
)

__all__ = [
    'get_logger', 'configure_logging', 'SIGMA_PER_RADIUS', 'check_radius',
    'sigma_for_radius', 'gaussian_kernel_1d', 'log_kernel_2d', 'box_kernel_2d'
]
