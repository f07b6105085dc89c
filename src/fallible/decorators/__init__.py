"""Decorators: @safe."""

from fallible.decorators.safe import safe

__all__ = ["safe"]
