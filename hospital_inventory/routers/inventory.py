from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from hospital_inventory.core.constants import INVENTORY_PATH
from hospital_inventory.core.session import SessionIdentity
from hospital_inventory.dependencies import get_db, require_session
from hospital_inventory.schemas.inventory import (
    ErrorResponse,
    InventoryCreated,
    InventoryItemRead,
    InventoryRecordRead,
    InventoryUpdate,
    MessageResponse,
)
from hospital_inventory.services.inventory_service import (
    create_inventory_items,
    delete_inventory_item,
    list_inventory,
    parse_lines,
    update_inventory_item,
)
from hospital_inventory.services.presentation import render_inventory_table

_ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

router = APIRouter(prefix=INVENTORY_PATH, tags=["Inventory"], responses=_ERRORS)


@router.post("", response_model=InventoryCreated, status_code=status.HTTP_201_CREATED)
def add_inventory_items(
    items: Any = Body(None),
    identity: SessionIdentity = Depends(require_session),
    db: Session = Depends(get_db),
):
    count = create_inventory_items(db, identity, parse_lines(items))
    return InventoryCreated(count=count)


@router.get("", response_model=List[InventoryItemRead])
def get_inventory_items(
    identity: SessionIdentity = Depends(require_session),
    db: Session = Depends(get_db),
):
    return list_inventory(db, identity)


@router.put("", response_model=InventoryRecordRead)
def update_inventory(
    payload: InventoryUpdate,
    identity: SessionIdentity = Depends(require_session),
    db: Session = Depends(get_db),
):
    return update_inventory_item(db, identity, payload)


@router.delete("", response_model=MessageResponse)
def delete_inventory(
    record_id: Optional[int] = Query(None, alias="id", description="Inventory record id"),
    identity: SessionIdentity = Depends(require_session),
    db: Session = Depends(get_db),
):
    delete_inventory_item(db, identity, record_id)
    return MessageResponse(message="Item deleted successfully.")


@router.get("/table", response_class=HTMLResponse)
def inventory_table(
    identity: SessionIdentity = Depends(require_session),
    db: Session = Depends(get_db),
):
    return HTMLResponse(render_inventory_table(list_inventory(db, identity)))


__all__ = ["router"]
