"""
cli/ - Command Line Interface

Demo driver and manifest loader on top of the container and ship models.
"""

from .demo import run_demo
from .main import build_parser, main, print_result

__all__ = [
    "run_demo",
    "build_parser",
    "main",
    "print_result",
]
