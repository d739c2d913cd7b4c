import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lostfound.config import CORS_ORIGINS, LOG_LEVEL
from lostfound.db.db import create_db_and_tables
from lostfound.routers import claims, items, missing_items, users
from lostfound.utils.errors import register_error_handlers

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    yield


app = FastAPI(title="Campus Lost & Found", lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Register routers
app.include_router(users.router, prefix="/users", tags=["Users"])
app.include_router(items.router, prefix="/items", tags=["Found Items"])
app.include_router(claims.router, prefix="/claims", tags=["Claims"])
app.include_router(missing_items.router, prefix="/missing-items", tags=["Missing Items"])


@app.get("/")
def root():
    return {"status": "ok"}
