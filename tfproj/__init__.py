"""Scaffold Terraform project layouts with module and environment boilerplate."""

__version__ = "0.1.0"
__all__ = ["build", "cli"]