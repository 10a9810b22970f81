import os

from dotenv import load_dotenv

load_dotenv(os.getenv("ENV_FILE"))

# General
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")

# Dictionary sources
CEDICT_ENCODING = os.getenv("CEDICT_ENCODING", "utf-8")
CEDICT_PATH = os.getenv("CEDICT_PATH") or None

# Line grammar
COMMENT_MARKER = "#"
BYTE_ORDER_MARK = "\ufeff"
