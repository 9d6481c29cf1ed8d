import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError

from todo_api.core.config import settings
from todo_api.core.database import connect, init_db
from todo_api.api import api_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    app = FastAPI(title="Todo API (FastAPI + MongoDB)")
    app.state.db = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["x-auth"],
    )

    @app.on_event("startup")
    def on_startup():
        if app.state.db is None:
            app.state.db = connect()
        init_db(app.state.db)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(
                # Rejected values may include the password
                [{k: v for k, v in e.items() if k != "input"} for e in exc.errors()]
            )},
        )

    @app.exception_handler(PyMongoError)
    async def store_error(request: Request, exc: PyMongoError):
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Bad Request"},
        )

    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting up on port %d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
