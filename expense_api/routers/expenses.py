import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette import status

from expense_api.core.errors import FieldValidationError, MalformedRequestError, ServerFault
from expense_api.db.store import ExpenseStore
from expense_api.models.envelope import success_envelope
from expense_api.models.expense import ExpenseIn
from expense_api.services.expense_builder import build_expense
from expense_api.services.expense_validation import validate_expense

router = APIRouter(prefix="/expenses", tags=["expenses"])
logger = logging.getLogger("expense_api.expenses")

CREATED_MESSAGE = "Expense created successfully"

# Dependencies -----------------------------------------------------


def get_store(request: Request) -> ExpenseStore:
    return request.app.state.store


async def read_json_object(request: Request) -> Dict[str, Any]:
    """Parse the raw body as a JSON object; an empty body counts as ``{}``."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise MalformedRequestError() from e
    if not isinstance(body, dict):
        raise MalformedRequestError("Request body must be a JSON object")
    return body


# Routes -----------------------------------------------------------
@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create an expense",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ExpenseIn.model_json_schema()}},
        }
    },
)
async def create_expense(
    request: Request,
    payload: Dict[str, Any] = Depends(read_json_object),
    store: ExpenseStore = Depends(get_store),
):
    # 1. Field validation (all violations reported together)
    errors = validate_expense(payload)
    if errors:
        logger.info("expense rejected", extra={"field_count": len(errors)})
        raise FieldValidationError(errors)

    # 2. Build + append; append is last so a failure leaves the store untouched
    try:
        expense = build_expense(
            payload,
            id_generator=request.app.state.id_generator,
            clock=request.app.state.clock,
        )
        store.add(expense)
    except Exception as e:
        logger.exception("failed to create expense")
        raise ServerFault() from e

    logger.info("expense created", extra={"expense_id": expense.id})
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=success_envelope(expense.to_public(), CREATED_MESSAGE),
    )
