import os

# Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./workouts.db")

# Tokens
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-me")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(3 * 24 * 60)))

# "v1" serves the open API, "v2" adds users and token-scoped ownership
WORKOUT_API_VERSION = os.getenv("WORKOUT_API_VERSION", "v2").lower()

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
