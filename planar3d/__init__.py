"""Three-dimensional vectors, rays and planes, with plane intersections."""

__version__ = "0.20.1"
__all__ = ["plane", "vector"]