"""Muscle group CRUD. PUT and DELETE carry the target id in the body."""

from fastapi import APIRouter, Depends

from liftlog.api.deps import get_muscle_group_service
from liftlog.core.enums import Body, parse_enum
from liftlog.schemas.common import IdPayload, SuccessResponse
from liftlog.schemas.muscle_group import MuscleGroupCreate, MuscleGroupPut, MuscleGroupRead, MuscleGroupUpdate
from liftlog.services.muscle_group_service import MuscleGroupService

router = APIRouter()


@router.get("", response_model=MuscleGroupRead | list[MuscleGroupRead])
async def list_muscle_groups(
    id: str | None = None,
    name: str | None = None,
    body: str | None = None,
    service: MuscleGroupService = Depends(get_muscle_group_service),
):
    """All muscle groups by name, or the single one named by `?id=`."""
    if id is not None:
        return await service.get_muscle_group(id)
    return await service.list_muscle_groups(name=name, body=parse_enum(Body, body))


@router.post("", response_model=MuscleGroupRead, status_code=201)
async def create_muscle_group(
    payload: MuscleGroupCreate,
    service: MuscleGroupService = Depends(get_muscle_group_service),
):
    return await service.create_muscle_group(payload)


@router.put("", response_model=MuscleGroupRead)
async def update_muscle_group(
    payload: MuscleGroupPut,
    service: MuscleGroupService = Depends(get_muscle_group_service),
):
    changes = MuscleGroupUpdate(**payload.model_dump(exclude_unset=True, exclude={"id"}))
    return await service.update_muscle_group(payload.id, changes)


@router.delete("", response_model=SuccessResponse)
async def delete_muscle_group(
    payload: IdPayload,
    service: MuscleGroupService = Depends(get_muscle_group_service),
):
    """Delete a muscle group; its links to exercises go with it."""
    await service.delete_muscle_group(payload.id)
    return SuccessResponse()
