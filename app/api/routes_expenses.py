"""
Expense API routes
"""

from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, Query

from app.core.db import get_store
from app.schemas.expense import ExpenseResponse
from app.services.record_store import RecordStore
from app.services.repositories import ExpenseRepo
from app.services.validation import require_valid, validate_expense
from app.utils.params import check_record_id, parse_filter_id, parse_pagination
from app.utils.responses import error_response, list_response, serialize, serialize_many, success_response

router = APIRouter()

@router.get("")
def list_expenses(
    id_concept: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    offset: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store)
):
    """List expenses, newest first, optionally for one concepto"""
    page_limit, page_offset = parse_pagination(limit, offset)
    filters = {"id_concept": parse_filter_id("id_concept", id_concept)}

    expenses = ExpenseRepo.find_all(store, filters, limit=page_limit, offset=page_offset)
    total = ExpenseRepo.count(store, filters)

    return list_response(
        serialize_many(ExpenseResponse, expenses),
        total=total,
        limit=page_limit,
        offset=page_offset
    )

@router.get("/{expense_id}")
def get_expense(expense_id: int, store: RecordStore = Depends(get_store)):
    """Get an expense with its concepto label"""
    check_record_id("Expense", expense_id)
    expense = ExpenseRepo.find_by_id(store, expense_id)
    if not expense:
        return error_response(
            error="Expense not found",
            message=f"No expense found with ID {expense_id}",
            status_code=404
        )
    return success_response(data=serialize(ExpenseResponse, expense))

@router.post("")
def create_expense(payload: Dict[str, Any] = Body(...), store: RecordStore = Depends(get_store)):
    """Create an expense"""
    payload, errors = validate_expense(payload)
    require_valid(errors)

    expense_id = ExpenseRepo.create(store, payload)
    expense = ExpenseRepo.find_by_id(store, expense_id)

    return success_response(
        data=serialize(ExpenseResponse, expense),
        message="Expense created successfully",
        status_code=201
    )

@router.put("/{expense_id}")
def update_expense(
    expense_id: int,
    payload: Dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_store)
):
    """Update the fields present in the body"""
    payload, errors = validate_expense(payload, partial=True)
    require_valid(errors)
    check_record_id("Expense", expense_id)

    changed = ExpenseRepo.update(store, expense_id, payload)
    if changed == 0:
        return error_response(
            error="No changes made",
            message="No valid fields were updated",
            status_code=400
        )

    expense = ExpenseRepo.find_by_id(store, expense_id)
    return success_response(
        data=serialize(ExpenseResponse, expense),
        message="Expense updated successfully"
    )

@router.delete("/{expense_id}")
def delete_expense(expense_id: int, store: RecordStore = Depends(get_store)):
    """Delete an expense"""
    check_record_id("Expense", expense_id)
    deleted = ExpenseRepo.delete(store, expense_id)
    if deleted == 0:
        return error_response(
            error="Delete failed",
            message="Failed to delete expense",
            status_code=500
        )

    return success_response(
        data={"id": expense_id, "deleted": True},
        message="Expense deleted successfully"
    )
