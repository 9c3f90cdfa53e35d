from __future__ import annotations

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from dexhub.api.errors import register_exception_handlers
from dexhub.api.routers.chains import router as chains_router
from dexhub.api.routers.geo import router as geo_router
from dexhub.api.routers.liquidity_config import router as liquidity_config_router
from dexhub.api.routers.pools import router as pools_router
from dexhub.api.routers.positions import router as positions_router
from dexhub.api.routers.quotes import router as quotes_router
from dexhub.api.routers.token_price import router as token_price_router
from dexhub.api.routers.wallet_transactions import router as wallet_transactions_router
from dexhub.shared.config import get_settings
from dexhub.shared.logging_config import configure_logging

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title="DEX Hub API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

app.include_router(quotes_router)
app.include_router(token_price_router)
app.include_router(positions_router)
app.include_router(pools_router)
app.include_router(liquidity_config_router)
app.include_router(chains_router)
app.include_router(geo_router)
app.include_router(wallet_transactions_router)


@app.options("/{path:path}", include_in_schema=False)
def preflight(path: str) -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)
