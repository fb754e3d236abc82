# utils/project_utils.py

from mantis_version.core.errors import EmptyResultError, NotFoundError
from mantis_version.models.schemas import ProjectId
from mantis_version.services.mantis import MantisService


async def resolve_project_id_by_name(service: MantisService, name: str) -> ProjectId:
    """
    Fetches the project list and returns the id of the project with the given name.
    The comparison is exact and case-sensitive; on duplicate names the first one wins.
    Raises EmptyResultError when the list is empty and NotFoundError when nothing matches.
    """
    listing = await service.get_projects()
    if not listing.projects:
        raise EmptyResultError()
    match = next((p for p in listing.projects if p.name == name), None)
    if not match:
        raise NotFoundError(name)
    return match.id
