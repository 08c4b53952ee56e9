import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from netpanel import models  # noqa: F401  registers tables on Base.metadata
from netpanel.config import settings
from netpanel.database import Base, engine
from netpanel.errors import register_error_handlers
from netpanel.routers import activity, devices, radius, system

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# alembic.ini sits at the project root, next to the netpanel package
PROJECT_DIR = Path(__file__).resolve().parent.parent


def run_migrations() -> None:
    from alembic import command
    from alembic.config import Config
    import sqlalchemy.exc

    alembic_cfg = Config(str(PROJECT_DIR / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_DIR / "alembic"))
    alembic_cfg.attributes["configure_logger"] = False
    try:
        command.upgrade(alembic_cfg, "head")
    except sqlalchemy.exc.OperationalError as e:
        # DB may have been created by create_all() earlier; tables exist but alembic_version is empty
        if "already exists" in str(e.orig).lower():
            command.stamp(alembic_cfg, "001")
            command.upgrade(alembic_cfg, "head")
        else:
            raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.run_migrations:
        try:
            run_migrations()
        except Exception:
            logging.exception("Alembic upgrade failed")
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title="Mikrotik & Radius Panel", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_error_handlers(app)

app.include_router(system.router)
app.include_router(devices.router)
app.include_router(radius.router)
app.include_router(activity.router)


@app.get("/")
def root():
    return {"service": "netpanel", "docs": "/docs"}
