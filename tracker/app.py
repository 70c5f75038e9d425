import logging
import os
from contextlib import asynccontextmanager

from databases import Database
from dotenv import load_dotenv
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tracker.modules.database import (
    connect_to_db,
    disconnect_from_db,
    get_database,
    health_check,
    init_db,
)
from tracker.modules.users.api import user_router

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("tracker.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_db()
    if os.getenv("INIT_DB", "true").lower() == "true":
        await init_db()
    logger.info("Fitness Tracker started")
    yield
    # Shutdown
    await disconnect_from_db()


app = FastAPI(title="Fitness Tracker", version="0.1.0", lifespan=lifespan)

# CORS Configuration
origins = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(user_router)


@app.get("/")
async def root():
    return {"status": "online", "system": "Fitness Tracker"}


@app.get("/health")
async def health(db: Database = Depends(get_database)):
    if await health_check(db):
        return {"database": "ok"}
    return JSONResponse(status_code=503, content={"database": "unavailable"})
