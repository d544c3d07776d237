"""Server-rendered pages: exercise list and form, muscle group management.

Filter state lives in the query string; every form is a single full
submission followed by a redirect.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from liftlog.api.deps import get_equipment_service, get_exercise_service, get_muscle_group_service
from liftlog.core.enums import Body, DifficultyType, ExerciseType, MovementType, parse_enum
from liftlog.core.exceptions import NotFoundError
from liftlog.schemas.exercise import ExerciseCreate
from liftlog.schemas.muscle_group import MuscleGroupCreate, MuscleGroupUpdate
from liftlog.services.equipment_service import EquipmentService
from liftlog.services.exercise_service import ExerciseService
from liftlog.services.muscle_group_service import MuscleGroupService

logger = logging.getLogger(__name__)

router = APIRouter(include_in_schema=False)

VIEW_MODES = ("grid", "list")


def get_templates(request: Request):
    """Get templates from app state."""
    return request.app.state.templates


def field_errors(exc: ValidationError) -> dict[str, str]:
    """First message per top-level field."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "form"
        errors.setdefault(field, error["msg"].removeprefix("Value error, "))
    return errors


def _exercise_form_data(form) -> dict:
    image_urls = [line.strip() for line in (form.get("image_urls") or "").splitlines() if line.strip()]
    return {
        "name": (form.get("name") or "").strip(),
        "description": (form.get("description") or "").strip() or None,
        "type": form.get("type") or None,
        "muscle_groups": form.getlist("muscle_groups"),
        "difficulty": form.getlist("difficulty"),
        "equipment": form.getlist("equipment"),
        "movements": form.getlist("movements"),
        "video_url": (form.get("video_url") or "").strip() or None,
        "image_urls": image_urls,
    }


def _muscle_group_form_data(form) -> dict:
    return {
        "name": (form.get("name") or "").strip(),
        "description": (form.get("description") or "").strip(),
        "body": form.get("body") or None,
    }


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return get_templates(request).TemplateResponse(request, "index.html", {})


@router.get("/exercises", response_class=HTMLResponse)
async def exercises_page(
    request: Request,
    type: str | None = None,
    difficulty: str | None = None,
    body: str | None = None,
    search: str | None = None,
    view: str = "grid",
    service: ExerciseService = Depends(get_exercise_service),
):
    """Exercise browser. Every filter change re-submits the form and re-queries."""
    filters = {
        "type": parse_enum(ExerciseType, type),
        "difficulty": parse_enum(DifficultyType, difficulty),
        "body": parse_enum(Body, body),
        "search": (search or "").strip(),
    }
    exercises = await service.list_exercises(
        search=filters["search"] or None,
        type=filters["type"],
        difficulty=filters["difficulty"],
        body=filters["body"],
    )
    return get_templates(request).TemplateResponse(
        request,
        "exercises/list.html",
        {
            "exercises": exercises,
            "filters": filters,
            "view": view if view in VIEW_MODES else "grid",
            "exercise_types": list(ExerciseType),
            "difficulties": list(DifficultyType),
            "bodies": list(Body),
        },
    )


async def _render_exercise_form(
    request: Request,
    muscle_groups: MuscleGroupService,
    equipment: EquipmentService,
    values: dict | None = None,
    errors: dict | None = None,
    status_code: int = 200,
):
    return get_templates(request).TemplateResponse(
        request,
        "exercises/new.html",
        {
            "values": values or {"muscle_groups": [], "difficulty": [], "equipment": [], "movements": []},
            "errors": errors or {},
            "muscle_groups": await muscle_groups.list_muscle_groups(),
            "equipment": await equipment.list_equipment(),
            "exercise_types": list(ExerciseType),
            "difficulties": list(DifficultyType),
            "movements": list(MovementType),
        },
        status_code=status_code,
    )


@router.get("/exercises/new", response_class=HTMLResponse)
async def new_exercise_page(
    request: Request,
    muscle_groups: MuscleGroupService = Depends(get_muscle_group_service),
    equipment: EquipmentService = Depends(get_equipment_service),
):
    return await _render_exercise_form(request, muscle_groups, equipment)


@router.post("/exercises/new", response_class=HTMLResponse)
async def create_exercise_from_form(
    request: Request,
    service: ExerciseService = Depends(get_exercise_service),
    muscle_groups: MuscleGroupService = Depends(get_muscle_group_service),
    equipment: EquipmentService = Depends(get_equipment_service),
):
    """Validate and create; on failure re-render with the submitted values and per-field messages."""
    data = _exercise_form_data(await request.form())
    try:
        payload = ExerciseCreate.model_validate(data)
        await service.create_exercise(payload)
    except ValidationError as exc:
        return await _render_exercise_form(request, muscle_groups, equipment, data, field_errors(exc), 400)
    except NotFoundError as exc:
        return await _render_exercise_form(request, muscle_groups, equipment, data, {"form": exc.message}, 400)
    return RedirectResponse(url="/exercises", status_code=303)


@router.get("/muscle-groups", response_class=HTMLResponse)
async def muscle_groups_page(
    request: Request,
    service: MuscleGroupService = Depends(get_muscle_group_service),
):
    return get_templates(request).TemplateResponse(
        request,
        "muscle_groups/list.html",
        {"muscle_groups": await service.list_muscle_groups()},
    )


def _render_muscle_group_form(request: Request, values: dict, errors: dict, action: str, status_code: int = 200):
    return get_templates(request).TemplateResponse(
        request,
        "muscle_groups/form.html",
        {"values": values, "errors": errors, "action": action, "bodies": list(Body)},
        status_code=status_code,
    )


@router.get("/muscle-groups/new", response_class=HTMLResponse)
async def new_muscle_group_page(request: Request):
    return _render_muscle_group_form(request, {}, {}, "/muscle-groups/new")


@router.post("/muscle-groups/new", response_class=HTMLResponse)
async def create_muscle_group_from_form(
    request: Request,
    service: MuscleGroupService = Depends(get_muscle_group_service),
):
    data = _muscle_group_form_data(await request.form())
    try:
        await service.create_muscle_group(MuscleGroupCreate.model_validate(data))
    except ValidationError as exc:
        return _render_muscle_group_form(request, data, field_errors(exc), "/muscle-groups/new", 400)
    return RedirectResponse(url="/muscle-groups", status_code=303)


@router.get("/muscle-groups/{muscle_group_id}/edit", response_class=HTMLResponse)
async def edit_muscle_group_page(
    request: Request,
    muscle_group_id: str,
    service: MuscleGroupService = Depends(get_muscle_group_service),
):
    muscle_group = await service.get_muscle_group(muscle_group_id)
    values = muscle_group.model_dump(include={"name", "description", "body"})
    return _render_muscle_group_form(request, values, {}, f"/muscle-groups/{muscle_group.id}/edit")


@router.post("/muscle-groups/{muscle_group_id}/edit", response_class=HTMLResponse)
async def update_muscle_group_from_form(
    request: Request,
    muscle_group_id: str,
    service: MuscleGroupService = Depends(get_muscle_group_service),
):
    data = _muscle_group_form_data(await request.form())
    action = f"/muscle-groups/{muscle_group_id}/edit"
    try:
        # the form always sends every field, so validate as a full record
        MuscleGroupCreate.model_validate(data)
        await service.update_muscle_group(muscle_group_id, MuscleGroupUpdate.model_validate(data))
    except ValidationError as exc:
        return _render_muscle_group_form(request, data, field_errors(exc), action, 400)
    return RedirectResponse(url="/muscle-groups", status_code=303)


@router.post("/muscle-groups/{muscle_group_id}/delete")
async def delete_muscle_group_from_form(
    muscle_group_id: str,
    service: MuscleGroupService = Depends(get_muscle_group_service),
):
    await service.delete_muscle_group(muscle_group_id)
    return RedirectResponse(url="/muscle-groups", status_code=303)
