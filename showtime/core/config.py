from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Showtime API"
    API_V1_STR: str = "/api/v1"
    SECRET_KEY: str = "changeme"
    LOG_LEVEL: str = "INFO"

    # Database. DATABASE_URL wins; otherwise it is built from the POSTGRES_* parts
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "showtime"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: str = ""
    SQL_ECHO: bool = False

    # New shows must fall inside [now, now + SCHEDULE_HORIZON_DAYS)
    SCHEDULE_HORIZON_DAYS: int = 30
    # Show search window when no explicit end date is given
    SEARCH_DEFAULT_DAYS: int = 7

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @model_validator(mode="after")
    def _assemble_db_url(self):
        if not self.DATABASE_URL:
            self.DATABASE_URL = (
                f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            )
        return self


settings = Settings()
