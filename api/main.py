import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from core import db
from indices import router as indices_router
from indices import schema, seeder

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Pool -> schema -> seed, once per process, before serving.
    await db.init_pool()
    try:
        try:
            await schema.ensure_schema()
        except schema.SchemaError:
            logger.exception("startup_aborted reason=schema")
            raise
        if seeder.seed_on_startup():
            await seeder.seed_if_empty()
        logger.info("startup_complete")
        yield
    finally:
        await db.close_pool()


configure_logging()

app = FastAPI(lifespan=lifespan)

app.include_router(indices_router.router, tags=["indices"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "geogrimoire api"}
