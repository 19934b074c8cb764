import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./sweetshop.db")
DATABASE_ECHO = _get_bool(os.getenv("DATABASE_ECHO"), default=False)

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", str(24 * 60)))

MIN_BCRYPT_ROUNDS = 10
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", str(MIN_BCRYPT_ROUNDS)))

MIN_PASSWORD_LENGTH = 8

CORS_ORIGINS = _get_list(
    os.getenv("CORS_ORIGINS"),
    ["http://localhost:5173", "http://localhost:3000"],
)


def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and JWT_SECRET_KEY == "change-me":
        raise RuntimeError("JWT_SECRET_KEY must be set in production.")
    if BCRYPT_ROUNDS < MIN_BCRYPT_ROUNDS:
        raise RuntimeError(f"BCRYPT_ROUNDS must be at least {MIN_BCRYPT_ROUNDS}.")
