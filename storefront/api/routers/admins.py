from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import AdminAuthOut, AdminRegisterIn, Envelope, LoginIn
from storefront.services.auth_service import AuthService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/register", response_model=Envelope[AdminAuthOut], status_code=201)
def register_admin(payload: AdminRegisterIn, db: Session = Depends(get_db)):
    result = AuthService(db).register_admin(
        payload.name, payload.email, payload.password, payload.role
    )
    return {"success": True, "message": "Admin registered successfully.", "data": result}


@router.post("/login", response_model=Envelope[AdminAuthOut])
def login_admin(payload: LoginIn, db: Session = Depends(get_db)):
    result = AuthService(db).login_admin(payload.email, payload.password)
    return {"success": True, "message": "Login successful.", "data": result}
