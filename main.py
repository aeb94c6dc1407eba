import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from database import check_connection, init_db
from exceptions import register_exception_handlers
from logging_config import setup_logging
from routers import properties_router, rent_router

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_tables:
        logger.info("AUTO_CREATE_TABLES is set, creating missing tables")
        init_db()
    yield


# App instance
app = FastAPI(title="Rent Ledger API", lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# Health check
@app.get("/api/health")
def health():
    if not check_connection():
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"ok": False})
    return {"ok": True}


app.include_router(properties_router)
app.include_router(rent_router)

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port, reload=True)
