"""Equipment CRUD. Same request shapes as muscle groups."""

from fastapi import APIRouter, Depends

from liftlog.api.deps import get_equipment_service
from liftlog.schemas.common import IdPayload, SuccessResponse
from liftlog.schemas.equipment import EquipmentCreate, EquipmentPut, EquipmentRead, EquipmentUpdate
from liftlog.services.equipment_service import EquipmentService

router = APIRouter()


@router.get("", response_model=EquipmentRead | list[EquipmentRead])
async def list_equipment(
    id: str | None = None,
    name: str | None = None,
    category: str | None = None,
    service: EquipmentService = Depends(get_equipment_service),
):
    if id is not None:
        return await service.get_equipment(id)
    return await service.list_equipment(name=name, category=category)


@router.post("", response_model=EquipmentRead, status_code=201)
async def create_equipment(
    payload: EquipmentCreate,
    service: EquipmentService = Depends(get_equipment_service),
):
    return await service.create_equipment(payload)


@router.put("", response_model=EquipmentRead)
async def update_equipment(
    payload: EquipmentPut,
    service: EquipmentService = Depends(get_equipment_service),
):
    changes = EquipmentUpdate(**payload.model_dump(exclude_unset=True, exclude={"id"}))
    return await service.update_equipment(payload.id, changes)


@router.delete("", response_model=SuccessResponse)
async def delete_equipment(
    payload: IdPayload,
    service: EquipmentService = Depends(get_equipment_service),
):
    await service.delete_equipment(payload.id)
    return SuccessResponse()
