from __future__ import annotations

import argparse

import uvicorn

from .config import Settings, configure_logging
from .db import Database
from .seed import seed_base
from .services import DentistaService, PacienteService, TurnoService


def cmd_init(args: argparse.Namespace, db: Database) -> None:
    seed_base(db)
    print("DB inicializada y seed completado.")


def cmd_list(args: argparse.Namespace, db: Database) -> None:
    if args.entity == "dentistas":
        for d in DentistaService(db).list_all():
            print(f"{d.id} | {d.apellido} {d.nombre} | {d.matricula}")
    elif args.entity == "pacientes":
        for p in PacienteService(db).list_all():
            print(f"{p.id} | {p.apellido} {p.nombre} | DNI {p.dni:.0f}")
    elif args.entity == "turnos":
        for t in TurnoService(db).list_all():
            print(f"{t.id} | {t.fecha_hora} | paciente {t.paciente_id} | odontologo {t.dentista_id} | {t.descripcion or '-'}")


def cmd_serve(args: argparse.Namespace, db: Database) -> None:
    uvicorn.run(
        "clinica_dental.api_main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="clinica_dental", description="CLI Clínica Dental")
    sub = p.add_subparsers(required=True)

    p_init = sub.add_parser("init", help="Crea la DB y carga el seed")
    p_init.set_defaults(func=cmd_init)

    p_list = sub.add_parser("list", help="Lista entidades")
    p_list.add_argument("entity", choices=["dentistas", "pacientes", "turnos"])
    p_list.set_defaults(func=cmd_list)

    p_serve = sub.add_parser("serve", help="Levanta la API HTTP")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.add_argument("--reload", action="store_true")
    p_serve.set_defaults(func=cmd_serve)

    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    db = Database(settings.database_url, echo=settings.db_echo)
    db.create_all()  # garantiza las tablas
    try:
        args.func(args, db)
    finally:
        db.dispose()


if __name__ == "__main__":
    main()
