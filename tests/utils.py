from collections import Counter

from app_types import GeneratedParticipant, Player, TeamId

SKILLS = ["Beginner", "Intermediate", "Advanced"]


def generate_players(n: int) -> list[Player]:
    """
    Generates N players with ids player-1 to player-n and cycling skill labels.

    Args:
        n: Number of players to generate

    Returns:
        List of Player objects in id order.
    """
    return [
        Player(
            id=f"player-{i}",
            first_name="Player",
            last_name=str(i),
            skill_level=SKILLS[i % len(SKILLS)],
        )
        for i in range(1, n + 1)
    ]


def team_distribution(participants: list[GeneratedParticipant]) -> dict[TeamId, int]:
    """Counts participants per team, keyed by team id in first-seen order."""
    return dict(Counter(p.team for p in participants))


def team_members(participants: list[GeneratedParticipant], team: TeamId) -> list[str]:
    return [p.player_id for p in participants if p.team == team]
