from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"
    TABLES_FILE: str = ""
    BATCH_MAX_ROUNDS: int = 5000
    DEFAULT_BATCH_ROUNDS: int = 200

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
