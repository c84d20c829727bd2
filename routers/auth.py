# routers/auth.py
"""
Owner registration, login and profile. Passwords are bcrypt-hashed with passlib;
login returns a bearer token carrying the owner id.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from database import get_session
from dependencies import create_access_token, get_current_owner_id
from errors import NotFoundError
from models import User
from schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserProfile, UserResponse, UserUpdate

router = APIRouter(prefix="/api/auth", tags=["auth"])

# Bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register_user(body: RegisterRequest, db: Session = Depends(get_session)):
     if db.query(User).filter(User.email == body.email).first():
          raise HTTPException(status_code=400, detail="Email already registered")

     user = User(
          email=body.email,
          password=pwd_context.hash(body.password),
          name=body.name,
          phone=body.phone,
     )
     db.add(user)
     db.commit()
     db.refresh(user)

     return TokenResponse(
          token=create_access_token(user.id, user.email),
          user=UserResponse(id=user.id, email=user.email, name=user.name),
     )


@router.post("/login", response_model=TokenResponse)
def login_user(body: LoginRequest, db: Session = Depends(get_session)):
     user = db.query(User).filter(User.email == body.email).first()
     if not user or not pwd_context.verify(body.password, user.password):
          raise HTTPException(status_code=401, detail="Invalid credentials")

     return TokenResponse(
          token=create_access_token(user.id, user.email),
          user=UserResponse(id=user.id, email=user.email, name=user.name),
     )


def _get_owner(db: Session, owner_id: int) -> User:
     user = db.get(User, owner_id)
     if user is None:
          raise NotFoundError("User", owner_id)
     return user


@router.get("/me", response_model=UserProfile, summary="Current owner profile")
def get_me(db: Session = Depends(get_session), owner_id: int = Depends(get_current_owner_id)):
     return _get_owner(db, owner_id)


@router.put("/me", response_model=UserProfile, summary="Update current owner profile")
def update_me(
     body: UserUpdate,
     db: Session = Depends(get_session),
     owner_id: int = Depends(get_current_owner_id),
):
     user = _get_owner(db, owner_id)
     if body.name:
          user.name = body.name
     if body.phone:
          user.phone = body.phone
     if body.password:
          user.password = pwd_context.hash(body.password)
     db.commit()
     db.refresh(user)
     return user
