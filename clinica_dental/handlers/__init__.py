from .dentista import router as dentista_router
from .paciente import router as paciente_router
from .turno import router as turno_router

__all__ = ["dentista_router", "paciente_router", "turno_router"]
