# app_types.py
"""
Type aliases and data classes for the Club Match Generator.

This module defines the value objects that flow through team sizing,
participant building, match pairing and scheduling.
"""

from dataclasses import dataclass, field
from enum import Enum

# =============================================================================
# Basic Type Aliases
# =============================================================================

# A player's stable identifier (owned by the roster provider)
PlayerId = str

# A short team token, e.g. 'A', 'B', 'C' or a caller-supplied name
TeamId = str


class MatchType(str, Enum):
    """Closed set of match variants a template can carry."""

    SINGLES = "Singles"
    DOUBLES = "Doubles"
    TOURNAMENT = "Tournament"
    MAINTENANCE = "Maintenance"
    SOCIAL = "Social"
    MIXED = "Mixed"

    @classmethod
    def for_side_size(cls, players_per_side: int) -> "MatchType":
        """Singles for one player a side, Doubles otherwise."""
        return cls.SINGLES if players_per_side == 1 else cls.DOUBLES


class SkillLevel(str, Enum):
    """Skill labels known to the roster; used for cosmetic ordering only."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    PROFESSIONAL = "Professional"
    MIXED = "Mixed"

    @property
    def rank(self) -> int:
        """Sort rank, higher plays first. Mixed ranks with unknown labels."""
        return _SKILL_RANKS.get(self, UNKNOWN_SKILL_RANK)

    @classmethod
    def rank_of(cls, label: str) -> int:
        """Rank for a free-form roster label; unknown or blank labels rank lowest."""
        try:
            return cls(label).rank
        except ValueError:
            return UNKNOWN_SKILL_RANK

    @classmethod
    def roster_levels(cls) -> list[str]:
        """Labels a player can carry, lowest first (Mixed describes matches only)."""
        return [level.value for level in cls if level != cls.MIXED]


UNKNOWN_SKILL_RANK = 1

_SKILL_RANKS = {
    SkillLevel.BEGINNER: 2,
    SkillLevel.INTERMEDIATE: 3,
    SkillLevel.ADVANCED: 4,
    SkillLevel.PROFESSIONAL: 5,
}


class RotationMode(str, Enum):
    """How players are rotated when two teams meet more than once."""

    HEAD_TO_HEAD = "head-to-head"
    ALL_COMBINATIONS = "all-combinations"


class TeamCountPreference(str, Enum):
    """Preference for an odd or even number of teams."""

    AUTO = "auto"
    ODD = "odd"
    EVEN = "even"


class GenerationFormat(str, Enum):
    """Which pairing strategy to run over the formed teams."""

    ROUND_ROBIN = "round-robin"
    TEAM_VS_TEAM = "team-vs-team"


# =============================================================================
# Roster Data Classes
# =============================================================================


@dataclass(frozen=True)
class Player:
    """A club member as supplied by the roster.

    Attributes:
        id: Unique, stable identifier
        first_name: Given name
        last_name: Family name
        skill_level: Free-form skill label (e.g. 'Intermediate')
        email: Optional contact address
    """

    id: PlayerId
    first_name: str
    last_name: str = ""
    skill_level: str = ""
    email: str | None = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class Court:
    """A bookable court."""

    id: str
    name: str
    court_type: str = ""
    status: str = "available"


# Mapping of team ids to the players assigned to them, in team order
TeamPlayerMap = dict[TeamId, list[Player]]


# =============================================================================
# Team Sizing Data Classes
# =============================================================================


@dataclass
class TeamConfiguration:
    """One candidate way of splitting the roster into teams.

    Attributes:
        team_size: Base team size the candidate was built from
        team_count: Number of teams
        players_per_team: Player count for each team, in team order
        description: Human-readable summary
        efficiency: Percentage of players placed (always 100 for accepted candidates)
        is_optimal: True when every team has exactly team_size players
    """

    team_size: int
    team_count: int
    players_per_team: list[int]
    description: str
    efficiency: int = 100
    is_optimal: bool = False


@dataclass
class TeamPartitionPlan:
    """Result of the team size calculator.

    When is_valid is True, sum(players_per_team) equals the player total,
    team_count equals len(players_per_team) and team_count is at least 2.
    """

    team_size: int
    team_count: int
    players_per_team: list[int]
    is_valid: bool
    description: str
    options: list[TeamConfiguration] = field(default_factory=list)

    @classmethod
    def invalid(cls, description: str) -> "TeamPartitionPlan":
        return cls(
            team_size=0,
            team_count=0,
            players_per_team=[],
            is_valid=False,
            description=description,
        )


# =============================================================================
# Match Data Classes
# =============================================================================


@dataclass(frozen=True)
class GeneratedParticipant:
    """A player's seat in a generated match."""

    player_id: PlayerId
    team: TeamId


@dataclass
class ParticipantBuildResult:
    """Flat team assignment produced by the participant builder.

    A team_count of 0 with no participants means no match is possible.
    """

    participants: list[GeneratedParticipant]
    team_count: int

    @property
    def has_match(self) -> bool:
        return self.team_count > 0


@dataclass
class MatchTemplate:
    """A match ready to be scheduled and saved.

    Created by the pairing generator with empty scheduling fields; the
    schedule enhancer fills in court_id, date and time.
    """

    id: str
    title: str
    match_type: MatchType
    skill_level: str
    court_id: str
    date: str
    time: str
    duration_minutes: int
    max_players: int
    description: str
    notes: str
    participants: list[GeneratedParticipant] = field(default_factory=list)


@dataclass
class RotationOptions:
    """Player rotation settings for repeated team meetings."""

    player_rotation: RotationMode = RotationMode.HEAD_TO_HEAD
    number_of_rounds: int = 1


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class Team:
    """A team as reconstructed from match participants."""

    id: TeamId
    players: list[Player]
    display_name: str


@dataclass
class FormattedTeams:
    teams: dict[TeamId, Team]
    is_doubles_match: bool
    team_count: int


@dataclass
class WinnerResult:
    winner_team: TeamId
    loser_team: TeamId
    winner_players: list[Player]
    loser_players: list[Player]


@dataclass
class GenerationResult:
    """Output of one full generation run.

    Attributes:
        plan: Team partition plan for the roster
        build: Flat team assignment
        team_player_map: Players grouped by team
        matches: Scheduled match templates
        success: Whether at least one match was generated
    """

    plan: TeamPartitionPlan
    build: ParticipantBuildResult
    team_player_map: TeamPlayerMap
    matches: list[MatchTemplate]
    success: bool = field(init=False)

    def __post_init__(self) -> None:
        self.success = len(self.matches) > 0
