# services/publisher.py

import logging
from enum import Enum

from mantis_version.models.schemas import InputRecord, VersionId
from mantis_version.services.mantis import MantisService
from mantis_version.utils.project_utils import resolve_project_id_by_name
from mantis_version.utils.validation import require_inputs, validate_input

logger = logging.getLogger(__name__)


class PublishState(str, Enum):
    PENDING = "pending"
    VALIDATING = "validating"
    RESOLVING = "resolving"
    CREATING = "creating"
    DONE = "done"
    FAILED = "failed"


class VersionPublisher:
    """Creates one version in a MantisHub project.

    Validating -> Resolving -> Creating -> Done. Any error moves the publisher
    to FAILED and is re-raised as is; nothing exists remotely before the final
    POST, so there is nothing to roll back.
    """

    def __init__(self, inputs: InputRecord, service: MantisService):
        self.inputs = inputs
        self.service = service
        self.state = PublishState.PENDING

    async def publish(self) -> VersionId:
        try:
            self.state = PublishState.VALIDATING
            require_inputs(self.inputs)
            payload = validate_input(self.inputs)

            self.state = PublishState.RESOLVING
            project_id = await resolve_project_id_by_name(self.service, self.inputs.project)

            self.state = PublishState.CREATING
            logger.info("Creating version %r in project %s", payload.name, project_id)
            created = await self.service.create_version(project_id, payload)
        except Exception:
            self.state = PublishState.FAILED
            raise

        self.state = PublishState.DONE
        return created.version.id
