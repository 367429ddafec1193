"""Domain ports (interfaces for infrastructure adapters)."""

from domain.shared.ports.clock import IClock

__all__ = [
    "IClock",
]
