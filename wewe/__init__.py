"""PIN authentication restricted to trusted networks: configuration, gateway discovery and the decision."""

__version__ = "0.1.0"
__all__ = ["auth", "config", "net"]