from backend.models.board import MIN_SIZE, Board, TileColor
from backend.models.coordinate import Coordinate, Direction

__all__ = ["MIN_SIZE", "Board", "Coordinate", "Direction", "TileColor"]
