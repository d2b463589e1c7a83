import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from kisan_assistant.api.rest_routes.advice import router as advice_router
from kisan_assistant.api.rest_routes.auth import router as auth_router
from kisan_assistant.api.rest_routes.chat import router as chat_router
from kisan_assistant.api.rest_routes.community import router as community_router
from kisan_assistant.api.rest_routes.market import router as market_router
from kisan_assistant.collections.database import init_database
from kisan_assistant.core.config import settings
from kisan_assistant.core.errors import BusinessError
from kisan_assistant.core.kv_store import KeyValueStore, create_kv_store
from kisan_assistant.services.advisor import FarmingAdvisor
from kisan_assistant.services.auth_service import AuthService
from kisan_assistant.services.conversation_session import ConversationSession
from kisan_assistant.services.transport import AITransport, GeminiTransport

load_dotenv()

logging.basicConfig(level=settings.LOG_LEVEL)


def create_app(
    kv_store: Optional[KeyValueStore] = None,
    transport: Optional[AITransport] = None,
    auth_network_delay: Optional[float] = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = kv_store if kv_store is not None else create_kv_store()
        ai_transport = transport if transport is not None else GeminiTransport()
        database = init_database(store, seed=settings.SEED_DATABASE)
        app.state.database = database
        app.state.auth_service = AuthService(database, network_delay=auth_network_delay)
        app.state.advisor = FarmingAdvisor(ai_transport)
        app.state.chat_session = ConversationSession(ai_transport)
        yield
        app.state.chat_session.destroy()

    app = FastAPI(lifespan=lifespan)

    @app.exception_handler(BusinessError)
    async def business_error_handler(request: Request, exc: BusinessError):
        return JSONResponse(
            status_code=exc.http_status,
            content={"detail": exc.message, "code": exc.code, **exc.extra},
        )

    app.include_router(auth_router)
    app.include_router(market_router)
    app.include_router(community_router)
    app.include_router(advice_router)
    app.include_router(chat_router)

    @app.get("/")
    async def root():
        return {"message": "Welcome to Kisan Assistant!"}

    return app


app = create_app()
