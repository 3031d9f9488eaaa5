# Team Id Constants
TEAM_ID_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Flexible Team Sizing Constants
FLEX_MIN_TEAM_SIZE = 3
FLEX_MAX_TEAM_SIZE = 6
FLEX_MIN_PLAYERS = 6
CONFIGURATION_EFFICIENCY = 100

# Participant Builder Constants
MIN_PLAYERS_FOR_MATCH = 4  # Two teams of two

# Team Count Preference Constants
MIN_TEAM_COUNT = 2
MIN_PLAYERS_PER_ADJUSTED_TEAM = 3

# Match Template Constants
DEFAULT_MATCH_DURATION_MINUTES = 90
DEFAULT_SKILL_LEVEL = "Mixed"
MAX_CONSECUTIVE_GAMES = 2

# Setup Constants
DEFAULT_NUM_COURTS = 2
DEFAULT_TEAM_SIZE = 4
DEFAULT_START_TIME = "18:00"
DEFAULT_END_TIME = "21:00"
DEFAULT_BREAK_MINUTES = 0
