"""
ship/ - Ship Aggregate

Container ship membership with count and weight limits.
"""

from .models import Ship

__all__ = [
    "Ship",
]
