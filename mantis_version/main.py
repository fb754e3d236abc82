import asyncio
import logging
import sys
from typing import Optional

import httpx

from mantis_version.core.config import ActionConfig
from mantis_version.core.errors import PublishError, TransportError
from mantis_version.models.schemas import VersionId
from mantis_version.services.mantis import MantisService, build_async_client
from mantis_version.services.publisher import VersionPublisher

logger = logging.getLogger("mantis_version")

OUTPUT_NAME = "version-id"


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level.upper())
    logger.propagate = False


def write_output(version_id: VersionId, github_output: Optional[str] = None) -> None:
    if github_output:
        with open(github_output, "a", encoding="utf-8") as fh:
            fh.write(f"{OUTPUT_NAME}={version_id}\n")
    else:
        print(f"::set-output name={OUTPUT_NAME}::{version_id}")


async def publish(config: ActionConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> VersionId:
    # One AsyncClient per run, closed when the run ends
    async with build_async_client(transport=transport) as client:
        inputs = config.to_input_record()
        publisher = VersionPublisher(inputs, MantisService(client=client, inputs=inputs))
        return await publisher.publish()


def run(config: ActionConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    try:
        version_id = asyncio.run(publish(config, transport))
    except PublishError as exc:
        logger.error("Failed to create version: %s", exc)
        if isinstance(exc, TransportError):
            logger.error("Error response data: %s", exc.body)
        return 1

    write_output(version_id, config.github_output)
    logger.info("Created version %s", version_id)
    return 0


def main() -> int:
    config = ActionConfig()
    configure_logging(config.log_level)
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
