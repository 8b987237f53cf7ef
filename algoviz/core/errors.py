# algoviz/core/errors.py
#!/usr/bin/env python3


class VisualizerError(Exception):
    """Base class for errors raised by the visualizer."""


class ConfigError(VisualizerError, ValueError):
    """Bad setting value or unknown algorithm name."""


class GridError(VisualizerError, IndexError):
    """Cell coordinates outside the grid."""
