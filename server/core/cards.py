# server/core/cards.py

"""
Card Service operations over a SQLAlchemy session.

Routes in ``server.api.cards`` call these after the caller has been
authenticated. Images are uploaded before anything is written, so a failed
upload never leaves a partial card behind.
"""

import logging
from typing import Optional
from fastapi import UploadFile
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from server.core import config
from server.core.errors import ConflictError, NotFound, ValidationError
from server.core.media import upload_image
from server.core.utils import slugify
from server.models import Card


logger = logging.getLogger(__name__)

# Form field name -> Card column
CARD_FIELDS = {
    "title": "title",
    "content": "content",
    "category": "category",
    "author": "author",
    "readTime": "read_time",
}


def _clean(fields: dict) -> dict:
    """Drops fields that were not supplied (None or blank)."""
    return {
        name: value for name, value in fields.items()
        if name in CARD_FIELDS and value is not None and str(value).strip()
    }


def _has_file(image: Optional[UploadFile]) -> bool:
    return image is not None and bool(image.filename)


def _commit(db: Session, card: Card):
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Slug conflict for '%s'", card.slug)
        raise ConflictError(f"A card with slug '{card.slug}' already exists.") from e
    db.refresh(card)


# -------------------------------
# Queries
# -------------------------------

def list_cards(db: Session, page: int = 1, page_size: int = config.PAGE_SIZE) -> list[Card]:
    """
    Returns one page of cards (1-based). An empty list means there are no
    more pages.
    """
    if page < 1:
        raise ValidationError("Page must be a positive integer.")
    return (
        db.query(Card)
        .order_by(Card.created_at.asc(), Card.id.asc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )


def get_card(db: Session, card_id: str) -> Card:
    card = db.get(Card, card_id)
    if card is None:
        raise NotFound()
    return card


# -------------------------------
# Writes
# -------------------------------

def create_card(db: Session, fields: dict, image: Optional[UploadFile]) -> Card:
    supplied = _clean(fields)
    if len(supplied) < len(CARD_FIELDS) or not _has_file(image):
        raise ValidationError("All fields are required.")

    slug = slugify(supplied["title"])
    if not slug:
        raise ValidationError("Title must contain at least one letter or digit.")

    image_url = upload_image(image)

    card = Card(slug=slug, image=image_url)
    for name, column in CARD_FIELDS.items():
        setattr(card, column, supplied[name])

    db.add(card)
    _commit(db, card)
    logger.info("Card created: %s (%s)", card.id, card.slug)
    return card


def update_card(db: Session, card_id: str, fields: dict, image: Optional[UploadFile] = None) -> Card:
    """
    Applies a partial update. Only supplied fields change; the image URL is
    replaced only when a new file comes with the request, and the slug
    follows the title.
    """
    card = get_card(db, card_id)
    supplied = _clean(fields)

    if "title" in supplied:
        slug = slugify(supplied["title"])
        if not slug:
            raise ValidationError("Title must contain at least one letter or digit.")
    else:
        slug = None

    if _has_file(image):
        card.image = upload_image(image)

    for name, value in supplied.items():
        setattr(card, CARD_FIELDS[name], value)
    if slug is not None:
        card.slug = slug

    _commit(db, card)
    logger.info("Card updated: %s (%s)", card.id, card.slug)
    return card


def delete_card(db: Session, card_id: str):
    card = get_card(db, card_id)
    db.delete(card)
    db.commit()
    logger.info("Card deleted: %s", card_id)
