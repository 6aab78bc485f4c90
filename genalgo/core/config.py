"""
⚙️ Configuration Management
Gestion centralisée de la configuration du moteur génétique
"""

from pathlib import Path
from typing import Optional
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration principale genalgo"""

    model_config = SettingsConfigDict(
        env_prefix="GENALGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environnement
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Sorties de logs
    log_json: bool = Field(default=False)
    log_file: Optional[Path] = Field(default=None)
    log_max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024)  # 10MB
    log_backup_count: int = Field(default=5, ge=0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Valide le niveau de log"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_file")
    @classmethod
    def ensure_path_absolute(cls, v: Optional[Path]) -> Optional[Path]:
        """S'assure que le chemin du fichier de log est absolu"""
        if v is None:
            return v
        return Path(v).expanduser().resolve()

    def is_production(self) -> bool:
        """Vérifie si on est en production"""
        return self.environment.lower() == "production"

    def is_testing(self) -> bool:
        """Vérifie si on est en mode test"""
        return self.environment.lower() == "testing"


@lru_cache()
def get_settings() -> Settings:
    """
    Retourne l'instance de configuration (singleton)
    Utilise lru_cache pour éviter de recharger à chaque appel
    """
    return Settings()
