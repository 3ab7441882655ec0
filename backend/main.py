import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.config import CORS_ORIGINS, LOG_LEVEL, WORKOUT_API_VERSION
from backend.database import Base, engine
from backend.errors import register_exception_handlers
from backend.routers import users, workouts

logger = logging.getLogger("workouts")


def create_app(auth_enabled: bool | None = None) -> FastAPI:
    """Build the API. ``auth_enabled=False`` serves the open v1 API, ``True`` the
    v2 API with users and owner-scoped workouts; ``None`` follows WORKOUT_API_VERSION."""
    if auth_enabled is None:
        auth_enabled = WORKOUT_API_VERSION != "v1"

    app = FastAPI(title="Workout API", version="2.0.0" if auth_enabled else "1.0.0")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/")
    def home():
        return {"message": "Workout API is running", "auth": auth_enabled}

    app.include_router(workouts.build_router(auth_enabled))
    if auth_enabled:
        app.include_router(users.router)

    logger.info("workout API %s ready", "v2" if auth_enabled else "v1")
    return app


logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
Base.metadata.create_all(bind=engine)

app = create_app()
