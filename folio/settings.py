from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Posts
    POSTS_DIR: Path = Path("posts")
    POSTS_EXTENSIONS: List[str] = [".md"]

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def normalized_extensions(self) -> List[str]:
        return [
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in self.POSTS_EXTENSIONS
            if ext
        ]


# Defaults for entry points; the loader itself is always handed a directory.
settings = Settings()
