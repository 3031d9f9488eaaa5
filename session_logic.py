# session_logic.py
import logging

from app_types import (
    Court,
    GenerationFormat,
    GenerationResult,
    MatchTemplate,
    Player,
    RotationOptions,
)
from constants import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_END_TIME,
    DEFAULT_MATCH_DURATION_MINUTES,
    DEFAULT_START_TIME,
    DEFAULT_TEAM_SIZE,
)
from exceptions import GenerationError
from match_generator import generate_matches
from match_utils import determine_best_skill_level
from schedule import enhance_matches_with_time_and_court, generate_time_slots
from team_builder import (
    build_participants_for_match,
    describe_build,
    group_participants_by_team,
    sort_players_by_skill,
)
from team_sizing import calculate_optimal_team_sizes

logger = logging.getLogger("app.session_logic")


class MatchGenerationSession:
    """
    Orchestrates one club night's match generation.

    roster -> team plan -> team assignment -> pairings -> court/time slots.
    This class only contains game logic and no persistence code.
    """

    def __init__(
        self,
        players: list[Player],
        courts: list[Court],
        preferred_team_size: int = DEFAULT_TEAM_SIZE,
        fmt: GenerationFormat = GenerationFormat.ROUND_ROBIN,
        rotation_options: RotationOptions | None = None,
        date: str = "",
        start_time: str = DEFAULT_START_TIME,
        end_time: str = DEFAULT_END_TIME,
        match_duration_minutes: int = DEFAULT_MATCH_DURATION_MINUTES,
        break_minutes: int = DEFAULT_BREAK_MINUTES,
        balance_skills: bool = False,
    ):
        if preferred_team_size < 1:
            raise GenerationError("Preferred team size must be at least 1.")
        self.players = list(players)
        self.courts = list(courts)
        self.preferred_team_size = preferred_team_size
        self.fmt = fmt
        self.rotation_options = rotation_options or RotationOptions()
        self.date = date
        self.start_time = start_time
        self.end_time = end_time
        self.match_duration_minutes = match_duration_minutes
        self.break_minutes = break_minutes
        self.balance_skills = balance_skills

        self.last_result: GenerationResult | None = None

    @property
    def roster(self) -> dict[str, Player]:
        return {p.id: p for p in self.players}

    def ordered_players(self) -> list[Player]:
        """Players in assignment order; skill-sorted when balancing is on."""
        if self.balance_skills:
            return sort_players_by_skill(self.players)
        return list(self.players)

    def time_slots(self) -> list[str]:
        return generate_time_slots(
            self.start_time,
            self.end_time,
            self.match_duration_minutes,
            self.break_minutes,
        )

    def generate(self) -> GenerationResult:
        """
        Runs a full generation and replaces any previous result.

        Returns:
            GenerationResult. success is False when the roster is too small
            to form any match; check plan.description for the reason.
        """
        players = self.ordered_players()
        plan = calculate_optimal_team_sizes(len(players), self.preferred_team_size)
        build = build_participants_for_match(players, self.preferred_team_size)

        if not build.has_match:
            logger.info("No match possible for %d player(s)", len(players))
            self.last_result = GenerationResult(
                plan=plan, build=build, team_player_map={}, matches=[]
            )
            return self.last_result

        team_player_map = group_participants_by_team(players, build.participants)
        matches = generate_matches(
            team_player_map,
            self.preferred_team_size,
            self.fmt,
            self.rotation_options,
        )
        self._apply_skill_levels(matches)
        enhance_matches_with_time_and_court(
            matches,
            self.time_slots(),
            self.courts,
            date=self.date,
            default_time=self.start_time,
        )

        self.last_result = GenerationResult(
            plan=plan,
            build=build,
            team_player_map=team_player_map,
            matches=matches,
        )
        logger.info(
            "Generated %d match(es) for %d team(s) from %d player(s)",
            len(matches),
            build.team_count,
            len(players),
        )
        return self.last_result

    def describe_teams(self) -> str:
        """Plan description, or the teams the builder's fallback actually formed."""
        result = self.last_result
        if result is None:
            return ""
        if result.plan.is_valid or not result.build.has_match:
            return result.plan.description
        return describe_build(result.build)

    def _apply_skill_levels(self, matches: list[MatchTemplate]) -> None:
        roster = self.roster
        for match in matches:
            match.skill_level = determine_best_skill_level(match.participants, roster)

    def update_courts(self, courts: list[Court]) -> None:
        """Replaces the available courts; applies on the next generation."""
        self.courts = list(courts)

    def update_team_size(self, preferred_team_size: int) -> None:
        preferred_team_size = int(preferred_team_size)
        if preferred_team_size < 1:
            raise GenerationError("Preferred team size must be at least 1.")
        self.preferred_team_size = preferred_team_size
