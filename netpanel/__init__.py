"""Router fleet and RADIUS subscriber management backend."""

__version__ = "0.1.0"
