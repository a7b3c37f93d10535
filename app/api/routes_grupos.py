"""
Grupo API routes
"""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends

from app.core.db import get_store
from app.schemas.grupo import GrupoResponse
from app.services.record_store import RecordStore
from app.services.repositories import GrupoRepo
from app.services.validation import require_valid, validate_grupo
from app.utils.params import check_record_id
from app.utils.responses import error_response, list_response, serialize, serialize_many, success_response

router = APIRouter()

@router.get("")
def list_grupos(store: RecordStore = Depends(get_store)):
    """List grupos alphabetically by nombre"""
    grupos = GrupoRepo.find_all(store)
    return list_response(serialize_many(GrupoResponse, grupos), total=GrupoRepo.count(store))

@router.get("/{grupo_id}")
def get_grupo(grupo_id: int, store: RecordStore = Depends(get_store)):
    check_record_id("Grupo", grupo_id)
    grupo = GrupoRepo.find_by_id(store, grupo_id)
    if not grupo:
        return error_response(
            error="Grupo not found",
            message=f"No grupo found with ID {grupo_id}",
            status_code=404
        )
    return success_response(data=serialize(GrupoResponse, grupo))

@router.post("")
def create_grupo(payload: Dict[str, Any] = Body(...), store: RecordStore = Depends(get_store)):
    payload, errors = validate_grupo(payload)
    require_valid(errors)

    grupo_id = GrupoRepo.create(store, payload)
    grupo = GrupoRepo.find_by_id(store, grupo_id)

    return success_response(
        data=serialize(GrupoResponse, grupo),
        message="Grupo created successfully",
        status_code=201
    )

@router.put("/{grupo_id}")
def update_grupo(
    grupo_id: int,
    payload: Dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_store)
):
    payload, errors = validate_grupo(payload, partial=True)
    require_valid(errors)
    check_record_id("Grupo", grupo_id)

    changed = GrupoRepo.update(store, grupo_id, payload)
    if changed == 0:
        return error_response(
            error="No changes made",
            message="No valid fields were updated",
            status_code=400
        )

    grupo = GrupoRepo.find_by_id(store, grupo_id)
    return success_response(
        data=serialize(GrupoResponse, grupo),
        message="Grupo updated successfully"
    )

@router.delete("/{grupo_id}")
def delete_grupo(grupo_id: int, store: RecordStore = Depends(get_store)):
    check_record_id("Grupo", grupo_id)
    deleted = GrupoRepo.delete(store, grupo_id)
    if deleted == 0:
        return error_response(
            error="Delete failed",
            message="Failed to delete grupo",
            status_code=500
        )

    return success_response(
        data={"id": grupo_id, "deleted": True},
        message="Grupo deleted successfully"
    )
