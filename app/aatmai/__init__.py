"""AatmAI / Mitra Guide: an empathetic companion and student toolkit."""

__version__ = "0.1.0"
