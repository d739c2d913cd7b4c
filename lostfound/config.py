import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./lostfound.db")
SQL_ECHO = os.getenv("SQL_ECHO", "0") == "1"

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

INSTITUTION_EMAIL_DOMAIN = os.getenv("INSTITUTION_EMAIL_DOMAIN", "crimson.ua.edu")

# Shared secret for the admin console
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "1234")

ARCHIVE_AFTER_DAYS = int(os.getenv("ARCHIVE_AFTER_DAYS", "7"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
