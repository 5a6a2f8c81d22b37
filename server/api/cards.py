# server/api/cards.py

import logging
from datetime import datetime
from pydantic import BaseModel, Field
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from server.api.auth import get_current_user
from server.core import cards as card_service
from server.core.errors import StoreError
from server.database import get_db


logger = logging.getLogger(__name__)

# Every route here requires a valid bearer token
router = APIRouter(prefix="/api/cards", dependencies=[Depends(get_current_user)])


class CardOut(BaseModel):
    """
    Wire representation of a card.
    """
    id: str = Field(serialization_alias="_id")
    title: str
    slug: str
    content: str
    image: str
    category: str
    author: str
    read_time: str = Field(serialization_alias="readTime")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    model_config = {"from_attributes": True}


class Message(BaseModel):
    message: str


def _form_fields(title, content, category, author, readTime) -> dict:
    return {
        "title": title,
        "content": content,
        "category": category,
        "author": author,
        "readTime": readTime,
    }


# -------------------------------
# Card Endpoints
# -------------------------------

@router.get("", response_model=list[CardOut])
def list_cards(page: int = Query(1, ge=1), db: Session = Depends(get_db)):
    try:
        return card_service.list_cards(db, page)
    except SQLAlchemyError as e:
        logger.error("Failed to fetch cards: %s", e, exc_info=True)
        raise StoreError("Failed to fetch cards.") from e


@router.post("", response_model=CardOut)
def create_card(
    title: str | None = Form(None),
    content: str | None = Form(None),
    category: str | None = Form(None),
    author: str | None = Form(None),
    readTime: str | None = Form(None),
    image: UploadFile | None = File(None),
    db: Session = Depends(get_db),
):
    fields = _form_fields(title, content, category, author, readTime)
    try:
        return card_service.create_card(db, fields, image)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to add card: %s", e, exc_info=True)
        raise StoreError("Failed to add card.") from e


@router.put("/{card_id}", response_model=CardOut)
def update_card(
    card_id: str,
    title: str | None = Form(None),
    content: str | None = Form(None),
    category: str | None = Form(None),
    author: str | None = Form(None),
    readTime: str | None = Form(None),
    image: UploadFile | None = File(None),
    db: Session = Depends(get_db),
):
    fields = _form_fields(title, content, category, author, readTime)
    try:
        return card_service.update_card(db, card_id, fields, image)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to update card %s: %s", card_id, e, exc_info=True)
        raise StoreError("Failed to update card.") from e


@router.delete("/{card_id}", response_model=Message)
def delete_card(card_id: str, db: Session = Depends(get_db)):
    try:
        card_service.delete_card(db, card_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to delete card %s: %s", card_id, e, exc_info=True)
        raise StoreError("Failed to delete card.") from e
    return {"message": "Card deleted successfully."}
