"""Types, gateway interface, queries, logging and services for working with a Flow blockchain access gateway."""

__version__ = "0.1.0"

__all__ = ["gateway", "logger", "queries", "services", "terminal", "types"]