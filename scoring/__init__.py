from .config import ScoringSettings, get_settings
from .exceptions import (
    HoleOutOfRangeError,
    InvalidRosterError,
    RoundClosedError,
    ScoringError,
    UnknownFormatError,
    UnknownPlayerError,
)
from .formats import GameFormat, available_formats, compute_format, refresh_formats
from .handicap import course_handicap, playing_handicaps, strokes_received
from .session import RoundSession
from .settlement import build_settlement
from .stableford import net_score, score_hole, stableford_points
from .status import format_winners, summarize

__all__ = [
    "GameFormat",
    "HoleOutOfRangeError",
    "InvalidRosterError",
    "RoundClosedError",
    "RoundSession",
    "ScoringError",
    "ScoringSettings",
    "UnknownFormatError",
    "UnknownPlayerError",
    "available_formats",
    "build_settlement",
    "compute_format",
    "course_handicap",
    "format_winners",
    "get_settings",
    "net_score",
    "playing_handicaps",
    "refresh_formats",
    "score_hole",
    "stableford_points",
    "strokes_received",
    "summarize",
]
