"""FastAPI routes exposing coordinate parsing and artifact download."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse

from deployer.modules.resource.service import (
    BAD_COORDINATES,
    NOT_FOUND,
    OperationResult,
    ResourceService,
)

router = APIRouter(prefix="/resources", tags=["resources"])


def get_service(request: Request) -> ResourceService:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "resource_service", None):
        raise HTTPException(status_code=500, detail="Resource service not initialized.")
    return container.resource_service


def _raise_for_result(result: OperationResult) -> None:
    if result.ok:
        return
    if result.code == BAD_COORDINATES:
        raise HTTPException(status_code=400, detail=result.message)
    if result.code == NOT_FOUND:
        raise HTTPException(status_code=404, detail=result.message)
    raise HTTPException(status_code=502, detail=result.message)


@router.get("/coordinates")
async def describe_coordinates(coordinates: str, svc: ResourceService = Depends(get_service)):
    result = svc.describe(coordinates=coordinates)
    _raise_for_result(result)
    return result.as_dict()


@router.get("/download")
def download(coordinates: str, svc: ResourceService = Depends(get_service)):
    result = svc.download(coordinates=coordinates)
    _raise_for_result(result)
    meta = result.data
    return FileResponse(
        meta["filePath"],
        media_type="application/octet-stream",
        filename=meta["fileName"],
    )
