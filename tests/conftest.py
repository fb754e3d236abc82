import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mantis_version.models.schemas import InputRecord

MANTIS_URL = "https://x"


def make_mantis_app(projects=None, version_id=42, projects_status=200, version_status=201):
    """Minimal MantisHub stand-in: project listing and version creation."""
    app = FastAPI()
    app.state.calls = []

    @app.get("/api/rest/projects")
    async def list_projects(request: Request):
        app.state.calls.append(("GET", request.url.path, dict(request.headers), None))
        body = {"projects": projects} if projects is not None else {}
        return JSONResponse(body, status_code=projects_status)

    @app.post("/api/rest/projects/{project_id}/versions")
    async def create_version(project_id: str, request: Request):
        payload = await request.json()
        app.state.calls.append(("POST", request.url.path, dict(request.headers), payload))
        return JSONResponse({"version": {"id": version_id, **payload}}, status_code=version_status)

    return app


@pytest.fixture
def mantis_app():
    return make_mantis_app(projects=[{"id": 1, "name": "Alpha"}, {"id": 2, "name": "Beta"}])


@pytest.fixture
def asgi_transport(mantis_app):
    return httpx.ASGITransport(app=mantis_app)


@pytest.fixture
def inputs():
    return InputRecord(url=MANTIS_URL, api_key="k", project="Alpha", name="1.0", released="true")
