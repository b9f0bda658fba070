from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# DB SQLite en archivo en la raíz del proyecto (junto al paquete)
DEFAULT_DB_PATH = Path(__file__).resolve().parents[1] / "clinica_dental.sqlite"
DEFAULT_DATABASE_URL = f"sqlite:///{DEFAULT_DB_PATH}"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Configuración de la aplicación.
    Se construye una sola vez y se pasa a create_app(): los handlers nunca
    leen el entorno por request.
    """
    token: str = ""
    database_url: str = DEFAULT_DATABASE_URL
    db_echo: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            token=os.getenv("TOKEN", ""),
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            db_echo=os.getenv("DB_ECHO", "0").strip().lower() in _TRUE,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
