"""Balance-method solver for a boundary value problem with coefficients that jump at an interface."""

__version__ = "0.1.0"
__all__ = ["scheme", "report", "cli"]