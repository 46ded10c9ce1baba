class ScoringError(Exception):
    """Base for all scoring errors."""


class UnknownPlayerError(ScoringError):
    """Player is not part of the round."""


class UnknownFormatError(ScoringError):
    """Format name is not one the engine knows."""


class HoleOutOfRangeError(ScoringError):
    """Hole number outside the round."""


class InvalidRosterError(ScoringError):
    """Players cannot start a round together (duplicate names, too many players)."""


class RoundClosedError(ScoringError):
    """Round has been settled and no longer accepts changes."""
