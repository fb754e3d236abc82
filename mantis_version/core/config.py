# core/config.py

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mantis_version.models.schemas import InputRecord


class ActionConfig(BaseSettings):
    # Workflow inputs, GitHub exposes them as INPUT_<NAME>
    url: str = Field("", validation_alias="INPUT_URL")
    api_key: str = Field("", validation_alias="INPUT_API-KEY")
    project: str = Field("", validation_alias="INPUT_PROJECT")
    name: str = Field("", validation_alias="INPUT_NAME")
    description: str = Field("", validation_alias="INPUT_DESCRIPTION")
    released: str = Field("", validation_alias="INPUT_RELEASED")
    obsolete: str = Field("", validation_alias="INPUT_OBSOLETE")
    timestamp: str = Field("", validation_alias="INPUT_TIMESTAMP")

    # Runner
    github_output: Optional[str] = Field(None, validation_alias="GITHUB_OUTPUT")
    log_level: str = Field("INFO", validation_alias="MANTIS_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    def to_input_record(self) -> InputRecord:
        return InputRecord(
            url=self.url,
            api_key=self.api_key,
            project=self.project,
            name=self.name,
            description=self.description,
            released=self.released,
            obsolete=self.obsolete,
            timestamp=self.timestamp,
        )
