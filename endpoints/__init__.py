"""Endpoint wrappers built on the request layer"""

from .hello_world import HelloWorld

__all__ = ["HelloWorld"]
