"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.
    
    Attributes:
        database_url: SQLAlchemy connection string
        secret_key: Key used to verify caller bearer tokens
        algorithm: Algorithm used for JWT signatures (typically HS256)
        access_token_expire_minutes: Lifetime of locally issued tokens
        
        cors_origins: Front-end origins allowed by CORS
        log_level: Root logging level
        
        # Bootstrap admin settings (optional)
        bootstrap_admin_id: Identity-provider subject promoted to first admin
        bootstrap_admin_email: Email recorded on the bootstrap admin account
    """
    # Database settings
    database_url: str
    
    # JWT settings
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    
    # HTTP settings
    cors_origins: List[str] = ["http://localhost:5173"]
    log_level: str = "INFO"
    
    # Bootstrap admin settings (optional - only used for first admin creation)
    bootstrap_admin_id: Optional[str] = None
    bootstrap_admin_email: Optional[str] = None

    class Config:
        """Configuration for environment variables loading"""
        env_file = ".env"
        case_sensitive = False

# Create settings instance
settings = Settings()
