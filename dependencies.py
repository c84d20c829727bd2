# dependencies.py
"""
Shared FastAPI dependencies: bearer-token verification and owner identity.
"""
from datetime import datetime, timedelta

from fastapi import Depends, HTTPException, Request
from jose import JWTError, jwt

from config import JWT_ALGORITHM, JWT_EXPIRE_DAYS, JWT_SECRET


def create_access_token(user_id: int, email: str) -> str:
     expires = datetime.utcnow() + timedelta(days=JWT_EXPIRE_DAYS)
     return jwt.encode({"id": user_id, "email": email, "exp": expires}, JWT_SECRET, algorithm=JWT_ALGORITHM)


# Token Auth Dependency
def verify_token(request: Request) -> dict:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise HTTPException(status_code=401, detail="Missing token")
     token = auth.split(" ")[1]
     try:
          return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
     except JWTError:
          raise HTTPException(status_code=403, detail="Invalid token")


def get_current_owner_id(token: dict = Depends(verify_token)) -> int:
     owner_id = token.get("id")
     if not owner_id:
          raise HTTPException(status_code=403, detail="Invalid token")
     return int(owner_id)
