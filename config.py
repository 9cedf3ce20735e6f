import os
from dotenv import load_dotenv
import logging

# Load environment variables
load_dotenv()


def _get_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Get token from environment variable (checked when the bot starts)
TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

ADMIN_IDS = [
    int(id_str) for id_str in os.getenv("ADMIN_IDS", "").split(",") if id_str.strip()
]

# Team generation
TEAM_STRATEGY = os.getenv("TEAM_STRATEGY", "goalkeeper_split")
MIN_PLAYERS = int(os.getenv("MIN_PLAYERS", "4"))
STRICT_PLAYER_IDS = _get_bool("STRICT_PLAYER_IDS")
STRICT_GOALKEEPERS = _get_bool("STRICT_GOALKEEPERS")
REPLACE_EXISTING_TEAMS = _get_bool("REPLACE_EXISTING_TEAMS")

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
