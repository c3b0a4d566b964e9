"""A falling-block puzzle game: pieces, board, rules and a pygame front end."""

__version__ = "1.0.0"
__all__ = ["block", "colors", "game", "grid", "main", "position"]