"""
Główny moduł aplikacji FastAPI dla katalogu użytkowników.
Rejestruje endpointy i przy starcie tworzy magazyn użytkowników oraz konto administratora.
"""

import logging
import sys
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.routes.auth import router as auth_router
from app.api.routes.users import router as users_router
from app.services.users.admin import init_admin_user
from app.services.users.manager import build_user_store

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Zarządzanie cyklem życia aplikacji - inicjalizacja magazynu i konta admina."""
    if settings.user_store_backend == "sql":
        from app.core.database import init_db
        init_db()

    store = build_user_store(settings.user_store_backend)
    app.state.user_store = store
    logger.info("User store ready (backend: %s)", settings.user_store_backend)

    # Utwórz konto admina
    init_admin_user(store, settings)

    yield


app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan
)

# CORS dla frontendu
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.include_router(auth_router)  # /api/auth/*
app.include_router(users_router)  # /api/users/*


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
