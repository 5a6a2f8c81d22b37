# server/api/auth.py

import logging
from pydantic import BaseModel, Field
from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from server.core.errors import InvalidCredentials, MissingToken, StoreError, UnknownUser
from server.core.security import create_access_token, decode_access_token, verify_password
from server.database import get_db
from server.models import User as UserModel


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class LoginRequest(BaseModel):
    username: str
    password: str


class Token(BaseModel):
    token: str


class User(BaseModel):
    id: str = Field(serialization_alias="_id")
    username: str
    role: str

    model_config = {"from_attributes": True}


def authenticate_user(db: Session, username: str, password: str) -> UserModel:
    user = db.query(UserModel).filter(UserModel.username == username).first()
    if not user or not verify_password(password, user.hashed_password):
        raise InvalidCredentials()
    return user


@router.post("/login", response_model=Token)
def login(form_data: LoginRequest, db: Session = Depends(get_db)):
    try:
        user = authenticate_user(db, form_data.username, form_data.password)
    except InvalidCredentials:
        logger.info("Failed login for '%s'", form_data.username)
        raise
    except SQLAlchemyError as e:
        logger.error("Login lookup failed: %s", e, exc_info=True)
        raise StoreError("Login failed") from e

    logger.info("User '%s' logged in", user.username)
    return {"token": create_access_token(data={"sub": user.id})}


# Missing headers are reported by get_current_user, not by the scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login", auto_error=False)


def get_current_user(token: str | None = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> UserModel:
    """
    Resolves the bearer token to the user it was issued for.
    Required by every card route.
    """
    if not token:
        raise MissingToken()
    user_id = decode_access_token(token)
    try:
        user = db.get(UserModel, user_id)
    except SQLAlchemyError as e:
        logger.error("User lookup failed: %s", e, exc_info=True)
        raise StoreError("Failed to verify user.") from e
    if user is None:
        raise UnknownUser()
    return user


@router.get("/me", response_model=User)
def read_users_me(current_user: UserModel = Depends(get_current_user)):
    return current_user
