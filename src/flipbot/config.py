import os
from dotenv import load_dotenv

from flipbot import PROJECT_ROOT

load_dotenv(PROJECT_ROOT / ".env")


def parse_bool(string: str) -> bool:
    return string.strip().lower() in ["1", "true", "yes", "on"]


# Time the computer appears to think before its move shows up in the GUI.
THINK_DELAY_MS = int(os.environ.get("FLIPBOT_THINK_DELAY_MS", "500"))

# Below this many discs on the board, the computer avoids flipping many discs.
EARLY_GAME_DISCS = int(os.environ.get("FLIPBOT_EARLY_GAME_DISCS", "20"))
FLIP_PENALTY = int(os.environ.get("FLIPBOT_FLIP_PENALTY", "3"))

VERBOSE = parse_bool(os.environ.get("FLIPBOT_VERBOSE", "false"))
