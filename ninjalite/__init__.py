"""Building blocks for build tools: depfile parsing, disk access and edit distance."""

__version__ = "0.1.0"