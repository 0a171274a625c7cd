"""Threaded dining philosophers simulation with argument parsing and a command-line entry point."""

__version__ = "0.1.0"

__all__ = ["cli", "parsing", "simulation", "sync", "timing"]