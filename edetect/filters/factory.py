#!/usr/bin/env python3
from ..config import EdgeDetectConfig
from ..errors import ConfigurationError
from ..utils.common import configure_logging, get_logger
from .gaussian import GaussianBlurFilter
from .laplacian import LaplacianOfGaussianFilter
from .marr_hildreth import MarrHildrethOperatorFilter
from .sobel import SobelOperatorFilter

logger = get_logger(__name__)

FILTERS = ("gaussian", "log", "marr-hildreth", "sobel")


def create_filter(name: str, config: EdgeDetectConfig = None, backend=None):
    """
    Assemble a filter from its name and an EdgeDetectConfig.

    Args:
        name (str): One of "gaussian", "log", "marr-hildreth", "sobel"
        config (EdgeDetectConfig): Filter settings (defaults when None)
        backend: Backend instance to share between filters; built from the config when None

    Returns:
        A filter exposing apply(dest, src)

    Raises:
        ConfigurationError: unknown filter name or invalid configuration
    """
    config = (config or EdgeDetectConfig()).validate()
    if config.log_level is not None:
        configure_logging(config.log_level)
    if name not in FILTERS:
        raise ConfigurationError(f"Unknown filter '{name}', expected one of {FILTERS}")
    if backend is None:
        backend = config.build_backend()

    logger.debug(f"Creating '{name}' filter on {backend!r}")
    if name == "gaussian":
        return GaussianBlurFilter(backend, config.radius)
    if name == "log":
        return LaplacianOfGaussianFilter(backend, config.radius)
    if name == "marr-hildreth":
        return MarrHildrethOperatorFilter(backend, config.radius, config.zero_cross_threshold)
    return SobelOperatorFilter(backend, config.smoothing_radius)
