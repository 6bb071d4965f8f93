import logging

from fastapi import FastAPI

from stackcontrol.api.routes import router
from stackcontrol.config import configure_logging, load_settings

app = FastAPI(title="stack-control", version="0.1.0")
app.include_router(router)
# Configure logging
configure_logging(load_settings())
logger = logging.getLogger(__name__)


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "stack-control", "version": "0.1.0"}
