from .image import Image, aligned_stride, DEFAULT_ALIGNMENT, SAMPLE_SIZE

__all__ = ['Image', 'aligned_stride', 'DEFAULT_ALIGNMENT', 'SAMPLE_SIZE']
