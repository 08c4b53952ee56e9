"""CLI for the panel: schema setup, serving, device status sweeps, secret checks."""
import argparse
import sys

from netpanel import models  # noqa: F401
from netpanel.config import settings
from netpanel.database import SessionLocal, Base, engine
from netpanel.models.radius import RadiusUser
from netpanel.services import device_service
from netpanel.utils.auth import verify_password


def cmd_init_db(args: argparse.Namespace) -> int:
    Base.metadata.create_all(bind=engine)
    print("Database tables created")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("netpanel.main:app", host=args.host, port=args.port, log_level=settings.log_level.lower())
    return 0


def cmd_refresh_devices(args: argparse.Namespace) -> int:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        for device in device_service.list_devices(db):
            device = device_service.refresh_device_status(db, device.id, device_service.routeros_probe)
            print(f"{device.id}\t{device.name}\t{device.status.value}")
        return 0
    finally:
        db.close()


def cmd_verify_password(args: argparse.Namespace) -> int:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        user = db.query(RadiusUser).filter(RadiusUser.username == args.username).first()
        if not user:
            print(f"error: radius user '{args.username}' not found", file=sys.stderr)
            return 1
        if not verify_password(args.password, user.password):
            print("password does not match")
            return 1
        print("password ok")
        return 0
    finally:
        db.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Mikrotik & Radius Panel CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    init = sub.add_parser("init-db", help="Create all tables")
    init.set_defaults(func=cmd_init_db)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)
    serve.set_defaults(func=cmd_serve)

    refresh = sub.add_parser("refresh-devices", help="Probe every device and store its status")
    refresh.set_defaults(func=cmd_refresh_devices)

    verify = sub.add_parser("verify-password", help="Check a radius user's password")
    verify.add_argument("--username", required=True, help="Radius username")
    verify.add_argument("--password", required=True, help="Password to check")
    verify.set_defaults(func=cmd_verify_password)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
