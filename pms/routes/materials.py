from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models.models import Material, MaterialOrder
from ..services.crud import create_entity, delete_entity, list_entities, update_entity


router = APIRouter(prefix="/api", tags=["materials"])


# ---------- CATALOG ----------
@router.get("/materials")
def list_materials(db: Session = Depends(get_db)):
    return list_entities(db, Material, order_by=Material.name.asc())


@router.post("/materials")
def create_material(payload: dict, db: Session = Depends(get_db)):
    return create_entity(db, Material, payload)


@router.put("/materials/{material_id}")
def update_material(material_id: str, payload: dict, db: Session = Depends(get_db)):
    material = update_entity(db, Material, material_id, payload)
    if material is None:
        raise HTTPException(status_code=404, detail="Not found")
    return material


@router.delete("/materials/{material_id}")
def delete_material(material_id: str, db: Session = Depends(get_db)):
    if not delete_entity(db, Material, material_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"success": True}


# ---------- ORDERS ----------
@router.get("/orders")
def list_orders(db: Session = Depends(get_db)):
    return list_entities(db, MaterialOrder)


@router.post("/orders")
def create_order(payload: dict, db: Session = Depends(get_db)):
    return create_entity(db, MaterialOrder, payload)


@router.put("/orders/{order_id}")
def update_order(order_id: str, payload: dict, db: Session = Depends(get_db)):
    order = update_entity(db, MaterialOrder, order_id, payload)
    if order is None:
        raise HTTPException(status_code=404, detail="Not found")
    return order


@router.delete("/orders/{order_id}")
def delete_order(order_id: str, db: Session = Depends(get_db)):
    if not delete_entity(db, MaterialOrder, order_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"success": True}
