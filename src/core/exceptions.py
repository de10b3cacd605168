"""Errors raised across layers (engine, game session, boundary models)."""


class EngineError(Exception):
    """Base class for everything the rules engine raises on purpose."""


# --- BOARD / GEOMETRY ---
class OutOfBoundsError(EngineError, IndexError):
    """A coordinate outside of the board was used. Never clamped: fail fast."""


class InvalidLayoutError(EngineError, ValueError):
    """A board layout string could not be parsed."""


class EmptySquareError(EngineError):
    """An operation that needs a piece was issued against an empty square."""


# --- CATALOG ---
class UnknownPieceKindError(EngineError, KeyError):
    """A piece kind is not registered in the catalog."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the plain message instead
        return str(self.args[0]) if self.args else ""


# --- GAME SESSION ---
class GameStateError(EngineError):
    """The game is not in a state that allows the requested action."""


class NotYourTurnError(GameStateError):
    pass


class IllegalMoveError(EngineError):
    pass


# --- BOUNDARY ---
class InvalidRequestError(EngineError, ValueError):
    """Raised from request model validators. pydantic turns it into a ValidationError."""
