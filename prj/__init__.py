"""prj: a personal project registry with aggregated git status."""

__version__ = "0.1.0"
