"""plateblock - parametric plate drawings with engineering dimensions."""

__version__ = "0.1.0"
