"""
Pygame host for Classic Pong
"""
