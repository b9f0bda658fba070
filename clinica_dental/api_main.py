from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import web
from .config import Settings
from .db import Database
from .handlers import dentista_router, paciente_router, turno_router
from .services import DentistaService, PacienteService, TurnoService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Arma la aplicación:
    - settings y base de datos se reciben ya construidos (o se leen del entorno)
    - crea las tablas si no existen
    - registra routers y el envoltorio de errores
    """
    settings = settings or Settings.from_env()
    database = database or Database(settings.database_url, echo=settings.db_echo)
    database.create_all()

    if not settings.token:
        logger.warning("TOKEN no configurado: todas las operaciones de escritura responderán 401")

    app = FastAPI(title="Clinica Dental API", version="1.0.0")

    app.state.settings = settings
    app.state.database = database
    app.state.turnos = TurnoService(database)
    app.state.pacientes = PacienteService(database)
    app.state.dentistas = DentistaService(database)

    app.add_exception_handler(StarletteHTTPException, web.http_exception_handler)
    app.add_exception_handler(RequestValidationError, web.validation_exception_handler)

    app.include_router(turno_router)
    app.include_router(paciente_router)
    app.include_router(dentista_router)

    logger.info("API lista (db=%s)", database.engine.url.render_as_string(hide_password=True))
    return app
