import os
from dotenv import load_dotenv

load_dotenv()


FRONTEND = os.environ.get("REVERSI_FRONTEND", "text")

LOG_LEVEL = os.environ.get("REVERSI_LOG_LEVEL", "WARNING").upper()

SQUARE_SIZE_PX = int(os.environ.get("REVERSI_SQUARE_SIZE_PX", "70"))

MESSAGE_SECONDS = int(os.environ.get("REVERSI_MESSAGE_SECONDS", "3"))
