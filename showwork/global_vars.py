# Settings shared by the command line and Discord entry points
# load_dotenv() must run before this module is imported

from os import getenv

DISCORD_TOKEN = getenv("DISCORD_TOKEN")  # API token for the bot
COMMAND_PREFIX = getenv("SHOWWORK_PREFIX", '$')
LOG_LEVEL = getenv("SHOWWORK_LOG_LEVEL", "WARNING").upper()

MAX_MSG_LEN = 2000
