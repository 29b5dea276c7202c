"""A small top-down field game built on an entity store with generational keys."""

__version__ = "0.1.0"