"""
Computer opponents for Classic Pong
"""

from classic_pong.ai.opponent import OpponentController

__all__ = ["OpponentController"]
