from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError, version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tanqory_ai.ai.chat.router import router as chat_router
from tanqory_ai.ai.chat.service import close_chat_service
from tanqory_ai.config import get_app_settings, get_client_base_url
from tanqory_ai.utils.logger import logger


def get_version() -> str:
    """Get the installed package version."""
    try:
        return version("tanqory-ai")
    except PackageNotFoundError:
        return "0.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Tanqory AI API starting",
        version=get_version(),
        environment=get_app_settings().environment.value,
    )
    yield
    await close_chat_service()


app = FastAPI(
    title="Tanqory AI API",
    description="Company-memory chat assistant",
    version=get_version(),
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_client_base_url()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {"status": "ok", "message": "Tanqory AI API is running"}


@app.get("/healthcheck")
async def healthcheck():
    """Health check endpoint."""
    return {"status": "ok", "message": "Tanqory AI API is running"}
