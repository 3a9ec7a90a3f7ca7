from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a simulation is built from invalid parameters."""
