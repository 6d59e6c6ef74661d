"""Collision detection building blocks: geometry, contacts, tree nodes and broad phase."""

__version__ = "0.1.0"