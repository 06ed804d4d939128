# rh_beneficios/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # --- Identificação do Ambiente ---
    APP_NAME: str = "RH Benefícios - Cálculo Mensal"

    # --- Snapshots de entrada (funcionários, setores, feriados, lançamentos) ---
    DATA_DIR: str = "data"
    EXPORT_DIR: str = "data/exports"

    # --- Logs ---
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings():
    return Settings()


# Instância global
settings = get_settings()
