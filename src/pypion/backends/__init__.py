from .factory import BACKENDS, build_backend

__all__ = ["BACKENDS", "build_backend"]
