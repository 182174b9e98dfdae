import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from libs.result import Return
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    body = Return.err(exc.base_error).as_dict()
    logger.warning(f"Client error: {exc.base_error.code} {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content=body)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(
        f"Server error: {exc.base_error.code} {request.url.path}",
        exc_info=exc.base_error.cause,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": "Internal server error"},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Let scheduled account mails finish before shutdown
    from src.depends import mail_dispatcher

    await mail_dispatcher.drain()


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(title="Account Service", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import auth, user

    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(user.router, tags=["User"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
