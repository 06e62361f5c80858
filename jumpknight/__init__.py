"""A side-scrolling platformer with text-file levels, spikes and a following camera."""

__version__ = "0.1.0"