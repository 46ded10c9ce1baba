from .base import BaseGolfModel
from .course import Course
from .hole import Hole, PerTee, Uniform
from .hole_score import HoleScore
from .player import Player
from .results import (
    MatchPlayResult,
    NassauPoints,
    NassauResult,
    PlayerScorecard,
    PlayerTotals,
    ScrambleResult,
    SegmentTotals,
    SixPointResult,
    SkinAward,
    SkinsResult,
    TeamMatchResult,
    TeamStanding,
)
from .round_state import RoundState, Teams
from .settlement import Settlement
from .tee import TeeBox

__all__ = [
    "BaseGolfModel",
    "Course",
    "Hole",
    "HoleScore",
    "MatchPlayResult",
    "NassauPoints",
    "NassauResult",
    "PerTee",
    "Player",
    "PlayerScorecard",
    "PlayerTotals",
    "RoundState",
    "ScrambleResult",
    "SegmentTotals",
    "Settlement",
    "SixPointResult",
    "SkinAward",
    "SkinsResult",
    "TeamMatchResult",
    "TeamStanding",
    "Teams",
    "TeeBox",
    "Uniform",
]
