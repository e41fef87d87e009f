from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models.models import InventoryItem, RentalItem
from ..services.crud import create_entity, delete_entity, list_entities, update_entity


router = APIRouter(prefix="/api", tags=["inventory"])


# ---------- INVENTORY (equipment and real estate) ----------
@router.get("/inventory")
def list_inventory(db: Session = Depends(get_db)):
    return list_entities(db, InventoryItem, order_by=InventoryItem.name.asc())


@router.post("/inventory")
def create_inventory_item(payload: dict, db: Session = Depends(get_db)):
    return create_entity(db, InventoryItem, payload)


@router.put("/inventory/{item_id}")
def update_inventory_item(item_id: str, payload: dict, db: Session = Depends(get_db)):
    item = update_entity(db, InventoryItem, item_id, payload)
    if item is None:
        raise HTTPException(status_code=404, detail="Not found")
    return item


@router.delete("/inventory/{item_id}")
def delete_inventory_item(item_id: str, db: Session = Depends(get_db)):
    if not delete_entity(db, InventoryItem, item_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"success": True}


# ---------- RENTALS ----------
@router.get("/rentals")
def list_rentals(db: Session = Depends(get_db)):
    return list_entities(db, RentalItem, order_by=RentalItem.start_date.asc())


@router.post("/rentals")
def create_rental(payload: dict, db: Session = Depends(get_db)):
    return create_entity(db, RentalItem, payload)


@router.put("/rentals/{rental_id}")
def update_rental(rental_id: str, payload: dict, db: Session = Depends(get_db)):
    rental = update_entity(db, RentalItem, rental_id, payload)
    if rental is None:
        raise HTTPException(status_code=404, detail="Not found")
    return rental


@router.delete("/rentals/{rental_id}")
def delete_rental(rental_id: str, db: Session = Depends(get_db)):
    if not delete_entity(db, RentalItem, rental_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"success": True}
