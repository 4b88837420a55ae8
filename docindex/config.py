import os
from dotenv import load_dotenv

from .exceptions import ConfigurationError

load_dotenv()

# Pagination
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "100"))

# Keyword search: shorter keywords are rejected before any document is scanned
MIN_KEYWORD_LENGTH = int(os.getenv("MIN_KEYWORD_LENGTH", "3"))

# Editor behaviour
AUTOSAVE_WORD_THRESHOLD = int(os.getenv("AUTOSAVE_WORD_THRESHOLD", "500"))
SUPPORTED_IMPORT_EXTENSIONS = {
    ext.strip().lower().lstrip(".")
    for ext in os.getenv("SUPPORTED_IMPORT_EXTENSIONS", "txt,md").split(",")
    if ext.strip()
}

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() == "true"
LOG_TO_CONSOLE = os.getenv("LOG_TO_CONSOLE", "true").lower() == "true"
LOG_DIR = os.path.abspath(os.getenv("LOG_DIR", os.path.join("data", "logs")))


def validate_settings() -> None:
    """Raise ConfigurationError if any setting is out of range."""
    problems = {}
    if PAGE_SIZE < 1:
        problems["PAGE_SIZE"] = PAGE_SIZE
    if MIN_KEYWORD_LENGTH < 1:
        problems["MIN_KEYWORD_LENGTH"] = MIN_KEYWORD_LENGTH
    if AUTOSAVE_WORD_THRESHOLD < 0:
        problems["AUTOSAVE_WORD_THRESHOLD"] = AUTOSAVE_WORD_THRESHOLD
    if not SUPPORTED_IMPORT_EXTENSIONS:
        problems["SUPPORTED_IMPORT_EXTENSIONS"] = sorted(SUPPORTED_IMPORT_EXTENSIONS)

    if problems:
        raise ConfigurationError(
            message=f"Invalid configuration values: {', '.join(problems)}",
            details={"invalid": problems},
        )
