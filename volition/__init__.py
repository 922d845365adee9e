"""Software 3D rendering building blocks: fixed-point and vector math, colours, scanline interpolators, events, timing, configuration, logging and locks."""

__version__ = "0.1.0"