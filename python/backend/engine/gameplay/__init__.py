from backend.engine.gameplay.game import GamePlay
from backend.engine.gameplay.view import GameView, NullView

__all__ = ["GamePlay", "GameView", "NullView"]
