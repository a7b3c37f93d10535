"""
Concepto API routes
"""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends

from app.core.db import get_store
from app.schemas.concepto import ConceptoResponse
from app.services.record_store import RecordStore
from app.services.repositories import ConceptoRepo
from app.services.validation import require_valid, validate_concepto
from app.utils.params import check_record_id
from app.utils.responses import error_response, list_response, serialize, serialize_many, success_response

router = APIRouter()

@router.get("")
def list_conceptos(store: RecordStore = Depends(get_store)):
    """List conceptos alphabetically by nombre"""
    conceptos = ConceptoRepo.find_all(store)
    return list_response(serialize_many(ConceptoResponse, conceptos), total=ConceptoRepo.count(store))

@router.get("/{concepto_id}")
def get_concepto(concepto_id: int, store: RecordStore = Depends(get_store)):
    check_record_id("Concepto", concepto_id)
    concepto = ConceptoRepo.find_by_id(store, concepto_id)
    if not concepto:
        return error_response(
            error="Concepto not found",
            message=f"No concepto found with ID {concepto_id}",
            status_code=404
        )
    return success_response(data=serialize(ConceptoResponse, concepto))

@router.post("")
def create_concepto(payload: Dict[str, Any] = Body(...), store: RecordStore = Depends(get_store)):
    payload, errors = validate_concepto(payload)
    require_valid(errors)

    concepto_id = ConceptoRepo.create(store, payload)
    concepto = ConceptoRepo.find_by_id(store, concepto_id)

    return success_response(
        data=serialize(ConceptoResponse, concepto),
        message="Concepto created successfully",
        status_code=201
    )

@router.put("/{concepto_id}")
def update_concepto(
    concepto_id: int,
    payload: Dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_store)
):
    payload, errors = validate_concepto(payload, partial=True)
    require_valid(errors)
    check_record_id("Concepto", concepto_id)

    changed = ConceptoRepo.update(store, concepto_id, payload)
    if changed == 0:
        return error_response(
            error="No changes made",
            message="No valid fields were updated",
            status_code=400
        )

    concepto = ConceptoRepo.find_by_id(store, concepto_id)
    return success_response(
        data=serialize(ConceptoResponse, concepto),
        message="Concepto updated successfully"
    )

@router.delete("/{concepto_id}")
def delete_concepto(concepto_id: int, store: RecordStore = Depends(get_store)):
    check_record_id("Concepto", concepto_id)
    deleted = ConceptoRepo.delete(store, concepto_id)
    if deleted == 0:
        return error_response(
            error="Delete failed",
            message="Failed to delete concepto",
            status_code=500
        )

    return success_response(
        data={"id": concepto_id, "deleted": True},
        message="Concepto deleted successfully"
    )
