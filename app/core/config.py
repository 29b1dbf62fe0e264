from typing import Annotated, List, Optional
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import BaseModel, EmailStr, Field, field_validator
import json


DEFAULT_EMPLOYEES = [
    {"id": 1, "name": "Alice", "email": "alice@example.com"},
    {"id": 2, "name": "Bob", "email": "bob@example.com"},
    {"id": 3, "name": "Charlie", "email": "charlie@example.com"},
]

DEFAULT_APPROVED_COMPANIES = [
    "Acme Plumbing",
    "XYZ Electrical",
    "Best Builders",
]


class SeedEmployee(BaseModel):
    """Employee directory entry loaded at startup"""
    id: int
    name: str = Field(..., min_length=1)
    email: EmailStr


class Settings(BaseSettings):
    # Application Settings
    app_name: str = Field(default="Visitor Registry API", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    ENVIRONMENT: str = Field(default="development", alias="ENVIRONMENT")

    # Server Configuration
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    reload: bool = Field(default=True, alias="RELOAD")

    # CORS Configuration
    API_CORS_ORIGINS: Optional[str] = Field(default=None, alias="API_CORS_ORIGINS")

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", alias="LOG_FORMAT")

    # Registry Seed Data
    seed_employees: List[SeedEmployee] = Field(
        default_factory=lambda: [SeedEmployee(**e) for e in DEFAULT_EMPLOYEES],
        alias="SEED_EMPLOYEES",
    )
    approved_contractor_companies: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_APPROVED_COMPANIES),
        alias="APPROVED_CONTRACTOR_COMPANIES",
    )

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator('seed_employees', mode='before')
    @classmethod
    def parse_seed_employees(cls, v):
        if isinstance(v, str):
            return json.loads(v)
        return v

    @field_validator('approved_contractor_companies', mode='before')
    @classmethod
    def parse_approved_companies(cls, v):
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [company.strip() for company in v.split(',') if company.strip()]
        return v

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def cors_origins(self) -> List[str]:
        if not self.API_CORS_ORIGINS:
            return []
        if self.API_CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.API_CORS_ORIGINS.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

# Global settings instance
settings = Settings()
