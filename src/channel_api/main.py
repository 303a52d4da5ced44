import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from channel_api.config import LOG_LEVEL
from channel_api.database.mongo import create_client, get_collections
from channel_api.database.stores import UserStore, ChatHistoryStore
from channel_api.errors import AppError
from channel_api.routes.auth_routes import router as auth_routes
from channel_api.routes.chat_routes import router as chat_routes
from channel_api.routes.page_routes import router as page_routes, STATIC_DIR
from channel_api.services.completion_gateway import CompletionGateway

logger = logging.getLogger(__name__)


def create_app(user_store=None, chat_store=None, gateway=None) -> FastAPI:
    """Build the API.

    Stores and gateway left as ``None`` are created from the environment
    when the app starts (MongoDB through motor, Groq for completions).
    """
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        owned_gateway = None

        if user_store is None or chat_store is None:
            client = create_client()
            users, history = get_collections(client)
            if user_store is None:
                app.state.user_store = UserStore(users)
                await app.state.user_store.ensure_indexes()
            if chat_store is None:
                app.state.chat_store = ChatHistoryStore(history)
            logger.info("MongoDB connected")

        if gateway is None:
            owned_gateway = CompletionGateway.from_env()
            app.state.gateway = owned_gateway

        yield

        if owned_gateway is not None:
            await owned_gateway.close()
        if client is not None:
            client.close()

    app = FastAPI(title="Channel API", lifespan=lifespan)
    app.state.user_store = user_store
    app.state.chat_store = chat_store
    app.state.gateway = gateway

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected body on {request.url.path}: {[e['loc'] for e in exc.errors()]}")
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    app.include_router(auth_routes, prefix="/api")
    app.include_router(chat_routes, prefix="/api")
    app.include_router(page_routes)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    return app
