# server/core/config.py

import os
from dotenv import load_dotenv


load_dotenv()


# -------------------------------
# Database
# -------------------------------

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/cards.db")


# -------------------------------
# Authentication
# -------------------------------

SECRET_KEY = os.getenv("JWT_SECRET_KEY", "")
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# Created on first startup when missing
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
ADMIN_ROLE = "admin"


# -------------------------------
# Cards & Media
# -------------------------------

PAGE_SIZE = int(os.getenv("CARDS_PAGE_SIZE", "10"))

CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME")
CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY")
CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET")
CLOUDINARY_FOLDER = os.getenv("CLOUDINARY_FOLDER", "cards")


# -------------------------------
# Server
# -------------------------------

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
