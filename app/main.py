from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.database import Base, engine
from app.logging_config import configure_logging
from app.routers.auth import router as auth_router
from app.routers.content import router as content_router
from app import models  # noqa: F401  (registers tables on Base.metadata)

settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(_: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


# Create FastAPI app
app = FastAPI(title="Content Canvas", lifespan=lifespan)

# Enable CORS (required for the Next.js dashboard)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(content_router)
app.include_router(auth_router)


# Health check
@app.get("/")
def health_check():
    return {"status": "ok"}
