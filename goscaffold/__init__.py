"""goscaffold -- scaffold new Go projects from a handful of templates."""

__version__ = "0.1.0"
