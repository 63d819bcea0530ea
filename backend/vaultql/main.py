"""
FastAPI backend for vaultql.

Serves the GraphQL API at /query (GraphiQL on GET when enabled) and a
health endpoint.
"""
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel

from .api.graphql import create_graphql_router
from .config import ServerConfig
from .db import DataStore
from .logging import get_logger
from .vault import VaultSession

logger = get_logger("main")


class HealthResponse(BaseModel):
    """Response with server health."""
    status: str
    timestamp: str
    clients: int
    secrets: int
    groups: int


def create_app(
    config: Optional[ServerConfig] = None,
    vault: Optional[VaultSession] = None,
    store: Optional[DataStore] = None,
) -> FastAPI:
    """
    Create the vaultql FastAPI app.

    Args:
        config: Server configuration. Read from the environment when omitted.
        vault: Vault session. A fresh key is generated when omitted.
        store: Data store. Seeded and sealed with vault when omitted.

    Raises:
        FatalInitError if a vault key cannot be generated
    """
    config = config or ServerConfig()
    vault = vault or VaultSession.create()
    store = store or DataStore.seed(vault)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        logger.info(f"Running on {config.address}")
        yield
        logger.info("Shutting down...")

    app = FastAPI(
        title="vaultql",
        description="GraphQL server for groups, clients, and sealed secrets",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(
        create_graphql_router(store, vault, graphiql=config.graphiql),
        prefix=config.graphql_path,
    )

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now().isoformat(),
            clients=len(store.clients),
            secrets=len(store.secrets),
            groups=len(store.groups),
        )

    return app
