from pydantic import field_validator
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Product Explorer"
    LOG_LEVEL: str = "INFO"

    # Database settings are resolved from the raw environment,
    # see app.core.database_config

    @field_validator('LOG_LEVEL')
    @classmethod
    def normalize_log_level(cls, v):
        # logging only accepts upper-case level names
        return v.strip().upper()

    class Config:
        case_sensitive = True

settings = Settings()
