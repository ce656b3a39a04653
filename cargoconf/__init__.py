"""Find Cargo configuration files, merge configuration layers, track value definitions and run programs."""

__version__ = "0.1.0"
__all__ = ["merge", "process", "value", "walk"]