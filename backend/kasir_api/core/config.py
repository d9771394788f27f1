from pydantic_settings import BaseSettings
from typing import List, Literal, Optional


class Settings(BaseSettings):
    ENV: str = "development"
    APP_NAME: str = "Kasir API"
    APP_VERSION: str = "1.0.0"

    DATABASE_URL: str = "sqlite:///./kasir.db"

    # sql | memory, fixed for the lifetime of the process
    STORAGE_BACKEND: Literal["sql", "memory"] = "sql"

    # Bootstrap
    CREATE_DATABASE: bool = True
    RUN_MIGRATIONS: bool = True
    RUN_SEEDERS: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # CORS
    CORS_ORIGINS: str = "*"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_sql(self) -> bool:
        return self.STORAGE_BACKEND == "sql"

    class Config:
        env_file = ".env"


settings = Settings()
