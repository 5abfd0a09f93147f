"""Dictionary-driven conversion between Chinese character variants, with phrase extraction."""

__version__ = "0.1.0"