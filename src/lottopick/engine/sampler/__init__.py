"""Number samplers."""

from .uniform import UniformSampler

__all__ = ["UniformSampler"]
