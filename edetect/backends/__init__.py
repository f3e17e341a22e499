"""
Convolution backends and their registry.

Usage:
    from edetect.backends import get_backend
    backend = get_backend("cpu")
    backend = get_backend("torch", device="cuda")
"""

from ..errors import ConfigurationError
from ..utils.common import get_logger
from .base import ConvolutionBackend, check_pair
from .cpu import CpuBackend
from .torch_backend import TorchBackend

logger = get_logger(__name__)


def _cuda_backend(device=None):
    if device is None or not str(device).startswith("cuda"):
        device = "cuda"
    return TorchBackend(device=device)


_REGISTRY = {
    "cpu": lambda device=None: CpuBackend(),
    "torch": lambda device=None: TorchBackend(device=device or "cpu"),
    "cuda": _cuda_backend,
}


def available_backends():
    """Names accepted by get_backend."""
    return sorted(_REGISTRY)


def get_backend(name: str, device=None) -> ConvolutionBackend:
    """
    Build a backend from its registry name.

    Args:
        name (str): "cpu", "torch" or "cuda"
        device: Torch device for the data-parallel backends (ignored by "cpu")

    Raises:
        ConfigurationError: unknown backend name
        BackendFailure: the backend's device is unavailable
    """
    try:
        factory = _REGISTRY[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown backend '{name}', expected one of {available_backends()}"
        ) from None
    backend = factory(device=device)
    logger.debug(f"Selected backend {backend!r}")
    return backend


__all__ = [
    'ConvolutionBackend',
    'CpuBackend',
    'TorchBackend',
    'available_backends',
    'get_backend',
    'check_pair',
]
