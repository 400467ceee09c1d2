"""
Classic Pong: two paddles, one ball, first to five
"""

__version__ = "1.0.0"
