"""Configuration settings using Pydantic BaseSettings."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class StoreConfig(BaseModel):
    """Location and formatting of the JSON task document."""

    path: Path = Field(default=Path("tasks_database.json"), description="Task document path")
    date_format: str = Field(default="%Y-%m-%d", description="strftime/strptime format for due dates")
    encoding: str = Field(default="utf-8", description="Text encoding of the task document")
    indent: Optional[int] = Field(default=4, ge=0, description="JSON indent, None for compact output")

    class Config:
        """Pydantic configuration."""
        frozen = True


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Storage Configuration
    store_path: Path = Field(default=Path("tasks_database.json"), description="JSON task document path")
    date_format: str = Field(default="%Y-%m-%d", description="Due date format")
    store_encoding: str = Field(default="utf-8", description="Task document encoding")
    json_indent: Optional[int] = Field(default=4, ge=0, description="JSON indent for the task document")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: Optional[Path] = Field(default=None, description="Directory for log files, console only when unset")

    class Config:
        """Pydantic configuration."""
        env_prefix = "TASKBOOK_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    def store_config(self) -> StoreConfig:
        """Build the store configuration from these settings."""
        return StoreConfig(
            path=self.store_path,
            date_format=self.date_format,
            encoding=self.store_encoding,
            indent=self.json_indent,
        )
