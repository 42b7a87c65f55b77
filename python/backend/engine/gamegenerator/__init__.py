from backend.engine.gamegenerator.generator import DEFAULT_SIZE, SUPPORTED_SIZES, GameGenerator

__all__ = ["DEFAULT_SIZE", "SUPPORTED_SIZES", "GameGenerator"]
