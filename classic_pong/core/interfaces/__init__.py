"""
Boundary protocols between the match core and its host
"""

from classic_pong.core.interfaces.listener import MatchListener
from classic_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["MatchListener", "RendererProtocol"]
