"""
relfetch: download a single GitHub release asset and unpack it.
"""

__version__ = "0.1.0"
