import os

DEFAULT_PORT = "8080"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Config:
    def __init__(self):
        # Empty PORT falls back to the default, same as unset
        self.port = os.getenv("PORT") or DEFAULT_PORT
        self.host = os.getenv("SERVERINFO_HOST", "0.0.0.0")
        self.log_level = os.getenv("SERVERINFO_LOG_LEVEL", "INFO").upper()
