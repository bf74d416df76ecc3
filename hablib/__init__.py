"""
Habitat package and service management for deployment tooling.
"""

__version__ = "0.3.0"
