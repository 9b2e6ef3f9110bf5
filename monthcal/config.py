"""Configuration for monthcal."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from monthcal.constants import NOTIFICATION_DELAY, STORAGE_KEY


class CalendarConfig(BaseModel):
    """Calendar configuration with Pydantic validation."""

    # Storage
    storage_path: Path = Field(default=Path("data/storage.json"))
    storage_key: str = Field(default=STORAGE_KEY, min_length=1)

    # Notifications
    notification_delay: float = Field(default=NOTIFICATION_DELAY, gt=0)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="monthcal.log")

    @classmethod
    def from_env(cls) -> "CalendarConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Storage
        if "MONTHCAL_STORAGE_PATH" in os.environ:
            config_dict["storage_path"] = Path(os.environ["MONTHCAL_STORAGE_PATH"])
        if os.environ.get("MONTHCAL_STORAGE_KEY"):
            config_dict["storage_key"] = os.environ["MONTHCAL_STORAGE_KEY"]

        # Notifications
        if "MONTHCAL_NOTIFICATION_DELAY" in os.environ:
            try:
                delay = float(os.environ["MONTHCAL_NOTIFICATION_DELAY"])
            except ValueError:
                delay = None  # Keep default if invalid
            if delay is not None and delay > 0:
                config_dict["notification_delay"] = delay

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        return cls(**config_dict)
