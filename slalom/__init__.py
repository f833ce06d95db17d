"""
Slalom utilities package.

This package contains two independent helpers:
- Codec (reversible pairing of two signed integers into one)
- Store (resilient async JSON document read/write)
"""

__version__ = "0.1.0"
