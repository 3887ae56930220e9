"""N-body starting configurations and graphics-free galaxy viewer helpers."""

__version__ = "0.1.0"

__all__ = ["bodies", "framerate", "galaxy", "sprites"]