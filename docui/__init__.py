"""
docui - keyboard-driven terminal dashboard for container resources
"""

__version__ = "0.1.0"
