"""Client-side building blocks for a service discovery and configuration registry."""

__version__ = "0.1.0"