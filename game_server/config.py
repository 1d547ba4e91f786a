# runtime settings, all overridable from the environment.
import os

YGO_API_BASE = os.getenv("YGO_API_BASE", "https://db.ygoprodeck.com/api/v7")
YGO_REQUEST_TIMEOUT = float(os.getenv("YGO_REQUEST_TIMEOUT", "10"))

# randomcard.php also returns spells and traps; give up after this many draws
MAX_RANDOM_ATTEMPTS = int(os.getenv("YGO_MAX_RANDOM_ATTEMPTS", "20"))

DEFAULT_DIFFICULTY = os.getenv("GAME_DEFAULT_DIFFICULTY", "medium")

HINT_COUNTS = {
    "easy": 5,
    "medium": 3,
    "hard": 1,
}
DEFAULT_HINT_COUNT = 3

# oldest rounds are dropped once the in-memory registry grows past this
MAX_ACTIVE_ROUNDS = int(os.getenv("GAME_MAX_ACTIVE_ROUNDS", "1000"))
