"""Organelles, membranes, duck-typed compound reactions and a sector grid for an artificial-life model."""

__version__ = "0.1.0"