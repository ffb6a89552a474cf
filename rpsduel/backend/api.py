"""FastAPI endpoint receiving interaction webhooks."""

from __future__ import annotations

import asyncio
import json
import logging
import random
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable

from fastapi import BackgroundTasks, Depends, FastAPI, Request
from fastapi.responses import JSONResponse, Response

from .catalog import ChoiceCatalog, get_catalog
from .config import BackendSettings, load_settings
from .decor import random_emoji
from .interactions import parse_interaction
from .logs import configure_logging
from .responses import error_body
from .router import InteractionRouter
from .security import SIGNATURE_HEADER, TIMESTAMP_HEADER, verify_signature
from .store import SessionStore, create_store
from .webhooks import HttpWebhookClient, WebhookClient, deliver_best_effort

logger = logging.getLogger(__name__)

MIN_SWEEP_INTERVAL_SECONDS = 1.0


async def _sweep_periodically(store: SessionStore, interval: float) -> None:
    while True:
        await asyncio.sleep(interval)
        try:
            store.sweep()
        except Exception:
            logger.exception("session sweep failed")


def create_app(
    store: SessionStore | None = None,
    webhook_client: WebhookClient | None = None,
    *,
    settings: BackendSettings | None = None,
    catalog: ChoiceCatalog | None = None,
    decorate: Callable[[], str] = random_emoji,
    rng: random.Random | None = None,
    sweep_floor_seconds: float = MIN_SWEEP_INTERVAL_SECONDS,
) -> FastAPI:
    settings = settings if settings is not None else load_settings()
    session_store = store if store is not None else create_store(settings.session_ttl_seconds)
    client = (
        webhook_client
        if webhook_client is not None
        else HttpWebhookClient(api_base_url=settings.api_base_url, bot_token=settings.bot_token)
    )
    interaction_router = InteractionRouter(
        store=session_store,
        catalog=catalog if catalog is not None else get_catalog(settings.catalog),
        app_id=settings.app_id,
        decorate=decorate,
        rng=rng,
    )
    if not settings.public_key:
        logger.warning("no public key configured, interaction signatures are not verified")

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        sweeper: asyncio.Task[None] | None = None
        if settings.session_ttl_seconds:
            interval = max(settings.session_ttl_seconds / 2, sweep_floor_seconds)
            sweeper = asyncio.create_task(_sweep_periodically(session_store, interval))
        try:
            yield
        finally:
            if sweeper is not None:
                sweeper.cancel()

    app = FastAPI(title="RPS Duel Interactions", version="0.1.0", lifespan=lifespan)
    app.state.router = interaction_router
    app.state.store = session_store

    def get_router() -> InteractionRouter:
        return interaction_router

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {"status": "ok", "sessions": len(session_store)}

    @app.post("/interactions")
    async def interactions(
        request: Request,
        background_tasks: BackgroundTasks,
        local_router: InteractionRouter = Depends(get_router),
    ) -> Response:
        raw_body = await request.body()
        if settings.public_key:
            signature = request.headers.get(SIGNATURE_HEADER)
            timestamp = request.headers.get(TIMESTAMP_HEADER)
            if not signature or not timestamp or not verify_signature(
                settings.public_key, signature, timestamp, raw_body
            ):
                logger.warning("rejected interaction with bad signature")
                return JSONResponse(status_code=401, content=error_body("invalid request signature"))

        try:
            payload = json.loads(raw_body)
        except ValueError:
            return JSONResponse(status_code=400, content=error_body("invalid request"))
        if not isinstance(payload, dict):
            return JSONResponse(status_code=400, content=error_body("invalid request"))

        result = local_router.dispatch(parse_interaction(payload))
        for call in result.followups:
            background_tasks.add_task(deliver_best_effort, client, call)

        if result.body is None:
            return Response(status_code=204)
        return JSONResponse(status_code=result.status_code, content=result.body)

    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
