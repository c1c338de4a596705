"""Game layer: live games that can be turned into records directly.

Quick start::

    from pgngame.core import Color
    from pgngame.game import GameSession, Player

    session = GameSession()
    session.new_game(Player(Color.WHITE, "Alice"), Player(Color.BLACK, "Bob"))
    session.submit_move("e4")
    record = session.to_record()
"""

from pgngame.game.interfaces import ILiveGame
from pgngame.game.player import Player
from pgngame.game.session import GameSession

__all__ = [
    "GameSession",
    "ILiveGame",
    "Player",
]
