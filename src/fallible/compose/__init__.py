"""Composition utilities: curry, flip, forward composition and Kleisli arrows."""

from fallible.compose.functions import (
    apply,
    coalesce,
    coalesce_with,
    compose,
    compose_optional,
    compose_outcome,
    curry,
    curry3,
    flip,
    forward,
    lift,
)

__all__ = [
    "apply",
    "coalesce",
    "coalesce_with",
    "compose",
    "compose_optional",
    "compose_outcome",
    "curry",
    "curry3",
    "flip",
    "forward",
    "lift",
]
