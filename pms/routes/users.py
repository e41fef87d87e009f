from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models.models import User, UserProfile
from ..services.crud import create_entity, delete_entity, list_entities, update_entity


router = APIRouter(prefix="/api", tags=["users"])


# ---------- USERS ----------
@router.get("/users")
def list_users(db: Session = Depends(get_db)):
    return list_entities(db, User, order_by=User.name.asc())


@router.post("/users")
def create_user(payload: dict, db: Session = Depends(get_db)):
    return create_entity(db, User, payload)


@router.put("/users/{user_id}")
def update_user(user_id: str, payload: dict, db: Session = Depends(get_db)):
    user = update_entity(db, User, user_id, payload)
    if user is None:
        raise HTTPException(status_code=404, detail="Not found")
    return user


@router.delete("/users/{user_id}")
def delete_user(user_id: str, db: Session = Depends(get_db)):
    if not delete_entity(db, User, user_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"success": True}


# ---------- PROFILES ----------
@router.get("/profiles")
def list_profiles(db: Session = Depends(get_db)):
    return list_entities(db, UserProfile)


@router.post("/profiles")
def create_profile(payload: dict, db: Session = Depends(get_db)):
    return create_entity(db, UserProfile, payload)


@router.put("/profiles/{profile_id}")
def update_profile(profile_id: str, payload: dict, db: Session = Depends(get_db)):
    profile = update_entity(db, UserProfile, profile_id, payload)
    if profile is None:
        raise HTTPException(status_code=404, detail="Not found")
    return profile


@router.delete("/profiles/{profile_id}")
def delete_profile(profile_id: str, db: Session = Depends(get_db)):
    if not delete_entity(db, UserProfile, profile_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"success": True}
