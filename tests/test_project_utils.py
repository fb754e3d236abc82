import httpx
import pytest

from mantis_version.core.errors import EmptyResultError, NotFoundError
from mantis_version.models.schemas import InputRecord
from mantis_version.services.mantis import MantisService, build_async_client
from mantis_version.utils.project_utils import resolve_project_id_by_name


async def _resolve(listing: dict, name: str):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=listing))
    async with build_async_client(transport=transport) as client:
        service = MantisService(client=client, inputs=InputRecord(url="https://x", api_key="k"))
        return await resolve_project_id_by_name(service, name)


@pytest.mark.asyncio
async def test_resolves_exact_name() -> None:
    listing = {"projects": [{"id": 1, "name": "Alpha"}, {"id": 2, "name": "Beta"}]}
    assert await _resolve(listing, "Alpha") == 1


@pytest.mark.asyncio
async def test_unknown_name_raises_not_found() -> None:
    with pytest.raises(NotFoundError) as info:
        await _resolve({"projects": [{"id": 2, "name": "Beta"}]}, "Alpha")
    assert info.value.project_name == "Alpha"


@pytest.mark.asyncio
async def test_match_is_case_sensitive() -> None:
    with pytest.raises(NotFoundError):
        await _resolve({"projects": [{"id": 1, "name": "alpha"}]}, "Alpha")


@pytest.mark.asyncio
async def test_first_duplicate_wins() -> None:
    listing = {"projects": [{"id": 5, "name": "Alpha"}, {"id": 9, "name": "Alpha"}]}
    assert await _resolve(listing, "Alpha") == 5


@pytest.mark.asyncio
@pytest.mark.parametrize("listing", [{"projects": []}, {}, {"projects": None}])
async def test_empty_or_missing_listing_raises_empty_result(listing: dict) -> None:
    with pytest.raises(EmptyResultError):
        await _resolve(listing, "Alpha")
