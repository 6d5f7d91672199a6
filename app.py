import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from domains.system.controller import router as system_router
from util.env_util import DEFAULT_HOST, get_port

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Backend listening at http://localhost:%s", app.state.port)
    yield
    logger.info("Backend shutting down.")


def create_app(port: int | None = None) -> FastAPI:
    app = FastAPI(lifespan=lifespan)
    app.state.port = port if port is not None else get_port()

    # Configure CORS
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

    app.include_router(system_router)
    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    uvicorn.run(app, host=DEFAULT_HOST, port=app.state.port)
