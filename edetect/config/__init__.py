from .config import EdgeDetectConfig

__all__ = ['EdgeDetectConfig']
