"""One round in progress: the score grid plus the calls that move it forward."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Union

from analytics.stats import cumulative_scores
from models.course import Course
from models.hole import Hole
from models.hole_score import HoleScore
from models.player import Player
from models.results import PlayerTotals
from models.round_state import RoundState, Teams
from models.settlement import Settlement

from .config import ScoringSettings, get_settings
from .exceptions import (
    HoleOutOfRangeError,
    InvalidRosterError,
    RoundClosedError,
    ScoringError,
    UnknownPlayerError,
)
from .formats import GameFormat, compute_format, parse_format, refresh_formats
from .handicap import course_handicap, tee_ratings
from .settlement import build_settlement
from .six_point import calculate_six_point
from .stableford import score_hole
from .status import summarize

logger = logging.getLogger(__name__)

MAX_PLAYERS = 4


class RoundSession:
    """
    Drives a single round.

    The session owns the RoundState and replaces it wholesale on every
    change; standings are always replayed from the grid, so amending an
    earlier hole needs no special handling.
    """

    def __init__(
        self,
        course: Course,
        players: Sequence[Player],
        formats: Iterable[Union[str, GameFormat]] = (),
        teams: Optional[Teams] = None,
        settings: Optional[ScoringSettings] = None,
    ):
        players = list(players)
        names = [p.name for p in players]
        if not players:
            raise InvalidRosterError("A round needs at least one player")
        if len(players) > MAX_PLAYERS:
            raise InvalidRosterError(f"At most {MAX_PLAYERS} players, got {len(players)}")
        if len(set(names)) != len(names):
            raise InvalidRosterError("Player names must be unique within a round")
        if not course.holes:
            raise ScoringError("Course has no holes to play")

        if teams is not None and len(players) == MAX_PLAYERS and not teams.covers(players):
            raise InvalidRosterError("Teams must split the four players in the round")
        if teams is not None and len(players) != MAX_PLAYERS:
            logger.debug("Ignoring teams for a %d-player round", len(players))
            teams = None

        self.course = course
        self.players = players
        self.teams = teams
        self.formats = [parse_format(f) for f in formats]
        self.settings = settings or get_settings()

        self._holes: List[Hole] = sorted(course.holes, key=lambda h: h.number)
        self.state = RoundState.new(players, len(self._holes))
        self._confirmed = [False] * len(self._holes)
        self._settlement: Optional[Settlement] = None

    # --- Lookups ---

    @property
    def hole_count(self) -> int:
        return len(self._holes)

    @property
    def current_hole(self) -> Hole:
        return self._holes[self.state.current_hole - 1]

    @property
    def is_closed(self) -> bool:
        return self._settlement is not None

    def get_player(self, name: str) -> Player:
        for player in self.players:
            if player.name == name:
                return player
        raise UnknownPlayerError(f"Player '{name}' is not in this round")

    def _check_open(self) -> None:
        if self.is_closed:
            raise RoundClosedError("Round has been settled")

    def _check_hole(self, hole_number: int) -> None:
        if not 1 <= hole_number <= self.hole_count:
            raise HoleOutOfRangeError(f"Hole {hole_number} outside 1-{self.hole_count}")

    def _tee_color(self, player: Player) -> str:
        return player.tee_color or self.settings.default_tee

    def reference_par(self, player: Player) -> int:
        """Par the course handicap is measured against for this player."""
        if self.settings.reference_par == "course":
            par = self.course.get_par(self._tee_color(player))
            if par is not None:
                return par
        return self.settings.fixed_reference_par

    def course_handicaps(self) -> Dict[str, int]:
        """Course handicap each player is scored with."""
        handicaps: Dict[str, int] = {}
        for player in self.players:
            rating, slope = tee_ratings(
                self.course.get_tee(self._tee_color(player)),
                self.settings.default_course_rating,
                self.settings.default_slope_rating,
            )
            handicaps[player.name] = course_handicap(
                player.handicap_index, slope, rating, self.reference_par(player)
            )
        return handicaps

    # --- Score entry ---

    def update_score(
        self, player_name: str, gross: Optional[int], hole_number: Optional[int] = None
    ) -> HoleScore:
        """
        Enter or amend a gross score (current hole by default); None clears it.

        Holes already played can be amended, but not holes ahead of the group.
        """
        self._check_open()
        player = self.get_player(player_name)
        if hole_number is None:
            hole_number = self.state.current_hole
        self._check_hole(hole_number)
        if hole_number > self.state.current_hole:
            raise HoleOutOfRangeError(f"Hole {hole_number} has not been reached yet")

        hole = self._holes[hole_number - 1]
        tee_color = self._tee_color(player)
        rating, slope = tee_ratings(
            self.course.get_tee(tee_color),
            self.settings.default_course_rating,
            self.settings.default_slope_rating,
        )
        score = score_hole(
            gross,
            player.handicap_index,
            hole.par_for(tee_color),
            hole.stroke_index_for(tee_color),
            course_rating=rating,
            slope_rating=slope,
            reference_par=self.reference_par(player),
            hole_count=self.hole_count,
        )
        self.state = self.state.with_score(player.name, hole_number, score)
        logger.debug("Hole %d %s: %s", hole_number, player.name, score)
        return score

    def all_scores_entered(self, hole_number: Optional[int] = None) -> bool:
        if hole_number is None:
            hole_number = self.state.current_hole
        self._check_hole(hole_number)
        return all(self.state.gross(p.name, hole_number) is not None for p in self.players)

    def toggle_confirmation(self) -> bool:
        """Flip the confirmed flag on the current hole; returns the new value."""
        self._check_open()
        index = self.state.current_hole - 1
        self._confirmed[index] = not self._confirmed[index]
        return self._confirmed[index]

    def is_confirmed(self, hole_number: Optional[int] = None) -> bool:
        if hole_number is None:
            hole_number = self.state.current_hole
        self._check_hole(hole_number)
        return self._confirmed[hole_number - 1]

    # --- Navigation ---

    def next_hole(self) -> Optional[Settlement]:
        """
        Move to the next hole and refresh standings.

        Leaving the last hole finishes the round and returns its settlement.
        """
        self._check_open()
        if self.state.current_hole >= self.hole_count:
            return self.settle()

        advanced = self.state.revised(current_hole=self.state.current_hole + 1)
        self.state = refresh_formats(self.players, advanced, self.teams)
        return None

    def previous_hole(self) -> None:
        self._check_open()
        if self.state.current_hole > 1:
            self.state = self.state.revised(current_hole=self.state.current_hole - 1)

    # --- Standings ---

    def compute(self, format_name: Union[str, GameFormat]):
        return compute_format(format_name, self.players, self.state, self.teams)

    def status(self) -> List[str]:
        return summarize(self.formats, self.state, self.players, self.teams)

    def cumulative_scores(self) -> List[PlayerTotals]:
        six_point = None
        if GameFormat.SIX_POINT in self.formats:
            result = calculate_six_point(self.players, self.state)
            six_point = result.points if result else None
        return cumulative_scores(self.players, self.state, six_point)

    def settle(self) -> Settlement:
        """Finish the round. Later calls return the same settlement."""
        if self._settlement is None:
            self._settlement = build_settlement(self.players, self.state, self.formats, self.teams)
            self.state = self._settlement.state
            logger.info("Round settled: %s", self._settlement.winners)
        return self._settlement
