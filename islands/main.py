import logging

from fastapi import FastAPI

from islands.api.routes import router
from islands.assets.startup import init_assets_for_app

app = FastAPI(title="islands-game", version="0.1.0")
app.include_router(router)
# Configure logging
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


@app.on_event("startup")
async def _startup() -> None:
    init_assets_for_app()


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "islands-game", "version": "0.1.0"}
