"""Pod group helpers for gang scheduling: group labels, wait timeouts, merge patches and errors."""

__version__ = "0.1.0"
__all__ = ["constants", "podgroup"]