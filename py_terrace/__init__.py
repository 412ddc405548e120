"""
py-terrace: terraced height fields over arbitrary node graphs.
"""

__version__ = "0.1.0"
