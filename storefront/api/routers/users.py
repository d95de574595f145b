from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import require_user
from storefront.data.database import get_db
from storefront.domain.schemas import Envelope, LoginIn, RegisterIn, UserAuthOut, UserOut
from storefront.services.auth_service import AuthService, Identity

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=Envelope[UserAuthOut], status_code=201)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    result = AuthService(db).register_user(payload.name, payload.email, payload.password)
    return {"success": True, "message": "User registered successfully", "data": result}


@router.post("/login", response_model=Envelope[UserAuthOut])
def login(payload: LoginIn, db: Session = Depends(get_db)):
    result = AuthService(db).login_user(payload.email, payload.password)
    return {"success": True, "message": "Login successful", "data": result}


@router.get("/me", response_model=Envelope[UserOut])
def me(identity: Identity = Depends(require_user)):
    return {"success": True, "message": "Profile fetched", "data": identity.record}
