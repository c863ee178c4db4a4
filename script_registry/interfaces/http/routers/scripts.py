"""Script endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from script_registry.interfaces.http.deps import get_script_service
from script_registry.modules.common.exceptions import ConflictError, NotFoundError, ValidationError
from script_registry.modules.scripts import Script, ScriptInput, ScriptService
from script_registry.schemas import ScriptPayload, ScriptResponse, SuccessResponse

router = APIRouter()


def _to_input(payload: ScriptPayload) -> ScriptInput:
    return ScriptInput(
        name=payload.name,
        command=payload.command,
        category=payload.category,
        description=payload.description or "",
        is_global=bool(payload.is_global),
        auto_enrollment=bool(payload.auto_enrollment),
        customer_ids=payload.customers or [],
    )


def _to_schema(script: Script) -> ScriptResponse:
    return ScriptResponse.model_validate(script)


@router.get("", response_model=List[ScriptResponse], summary="List scripts, most recently updated first")
async def list_scripts(service: ScriptService = Depends(get_script_service)):
    scripts = await service.list_scripts()
    return [_to_schema(script) for script in scripts]


@router.get("/{script_id}", response_model=ScriptResponse, summary="Get a script")
async def get_script(script_id: str, service: ScriptService = Depends(get_script_service)):
    script = await service.get_script(script_id)
    if script is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Script not found")
    return _to_schema(script)


@router.post(
    "",
    response_model=ScriptResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a script",
)
async def create_script(payload: ScriptPayload, service: ScriptService = Depends(get_script_service)):
    try:
        script = await service.create_script(_to_input(payload))
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return _to_schema(script)


@router.put("/{script_id}", response_model=ScriptResponse, summary="Replace a script")
async def update_script(
    script_id: str,
    payload: ScriptPayload,
    service: ScriptService = Depends(get_script_service),
):
    try:
        script = await service.update_script(script_id, _to_input(payload))
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Script not found") from exc
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return _to_schema(script)


@router.delete("/{script_id}", response_model=SuccessResponse, summary="Delete a script")
async def delete_script(script_id: str, service: ScriptService = Depends(get_script_service)):
    try:
        await service.delete_script(script_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Script not found") from exc
    return SuccessResponse(message="Script deleted successfully")
