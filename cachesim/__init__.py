"""Simulator of a set-associative, write-through CPU cache in front of a small DRAM."""

__version__ = "0.1.0"