"""
Backend Clínica Dental.

Estructura:
- config.py   : Settings leídos del entorno (.env) y logging
- db.py       : engine y sesiones SQLAlchemy
- models.py   : modelos ORM
- schemas.py  : registros de dominio y cuerpos de request (pydantic)
- errors.py   : errores de la capa de servicios
- services.py : lógica de dominio (turnos, pacientes, dentistas)
- web.py      : envoltorio uniforme de respuestas JSON
- deps.py     : dependencias FastAPI (token, servicios, parseo)
- handlers/   : un router por entidad
- api_main.py : factory de la aplicación FastAPI
- seed.py     : datos iniciales
- cli.py      : comandos de consola
"""
