"""
Guest API routes
"""

from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, Query

from app.core.db import get_store
from app.schemas.guest import GuestResponse
from app.services.record_store import RecordStore
from app.services.repositories import GuestRepo
from app.services.validation import require_valid, validate_guest
from app.utils.params import check_record_id, parse_bool, parse_pagination
from app.utils.responses import error_response, list_response, serialize, serialize_many, success_response

router = APIRouter()

@router.get("")
def list_guests(
    gender: Optional[str] = Query(None),
    family: Optional[str] = Query(None),
    confirmation: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    offset: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store)
):
    """List guests, newest first, with optional filters and pagination"""
    page_limit, page_offset = parse_pagination(limit, offset)
    filters = {
        "gender": gender,
        "family": family,
        "confirmation": parse_bool(confirmation),
    }

    guests = GuestRepo.find_all(store, filters, limit=page_limit, offset=page_offset)
    total = GuestRepo.count(store, filters)

    return list_response(
        serialize_many(GuestResponse, guests),
        total=total,
        limit=page_limit,
        offset=page_offset
    )

@router.get("/{guest_id}")
def get_guest(guest_id: int, store: RecordStore = Depends(get_store)):
    """Get a guest by id"""
    check_record_id("Guest", guest_id)
    guest = GuestRepo.find_by_id(store, guest_id)
    if not guest:
        return error_response(
            error="Guest not found",
            message=f"No guest found with ID {guest_id}",
            status_code=404
        )
    return success_response(data=serialize(GuestResponse, guest))

@router.post("")
def create_guest(payload: Dict[str, Any] = Body(...), store: RecordStore = Depends(get_store)):
    """Create a guest"""
    payload, errors = validate_guest(payload)
    require_valid(errors)

    guest_id = GuestRepo.create(store, payload)
    guest = GuestRepo.find_by_id(store, guest_id)

    return success_response(
        data=serialize(GuestResponse, guest),
        message="Guest created successfully",
        status_code=201
    )

@router.put("/{guest_id}")
def update_guest(
    guest_id: int,
    payload: Dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_store)
):
    """Update the fields present in the body"""
    payload, errors = validate_guest(payload, partial=True)
    require_valid(errors)
    check_record_id("Guest", guest_id)

    changed = GuestRepo.update(store, guest_id, payload)
    if changed == 0:
        return error_response(
            error="No changes made",
            message="No valid fields were updated",
            status_code=400
        )

    guest = GuestRepo.find_by_id(store, guest_id)
    return success_response(
        data=serialize(GuestResponse, guest),
        message="Guest updated successfully"
    )

@router.delete("/{guest_id}")
def delete_guest(guest_id: int, store: RecordStore = Depends(get_store)):
    """Delete a guest"""
    check_record_id("Guest", guest_id)
    deleted = GuestRepo.delete(store, guest_id)
    if deleted == 0:
        return error_response(
            error="Delete failed",
            message="Failed to delete guest",
            status_code=500
        )

    return success_response(
        data={"id": guest_id, "deleted": True},
        message="Guest deleted successfully"
    )
