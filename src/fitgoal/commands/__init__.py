"""CLI commands for fitgoal."""

from .generate import generate
from .history import history, show
from .init import init
from .serve import serve

__all__ = [
    "generate",
    "history",
    "init",
    "serve",
    "show",
]
