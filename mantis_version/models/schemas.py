# models/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import Optional, List, Union

ProjectId = Union[int, str]
VersionId = Union[int, str]


class InputRecord(BaseModel):
    url: str = ""
    api_key: str = ""
    project: str = ""
    name: str = ""
    description: str = ""
    released: str = ""
    obsolete: str = ""
    timestamp: str = ""


class VersionRequest(BaseModel):
    name: str
    description: Optional[str] = None
    released: Optional[bool] = None
    obsolete: Optional[bool] = None
    timestamp: Optional[str] = None  # ISO-8601, UTC, "Z" suffix

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)


class Project(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: ProjectId
    name: str


class ProjectList(BaseModel):
    projects: Optional[List[Project]] = None


class Version(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: VersionId


class CreatedVersion(BaseModel):
    version: Version
