"""
GraphQL API for groups, secrets, and clients.

Strawberry code-first schema served through FastAPI. The data store and
vault session reach resolvers through the request context.
"""

from typing import Optional

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from ..db import models
from ..db import DataStore
from ..logging import get_logger
from ..vault import VaultSession
from . import resolvers

logger = get_logger("api.graphql")


def _store(info: Info) -> DataStore:
    return info.context["store"]


def _vault(info: Info) -> VaultSession:
    return info.context["vault"]


@strawberry.type(name="Client")
class ClientType:
    name: str

    @staticmethod
    def from_model(client: models.Client) -> "ClientType":
        return ClientType(name=client.name)


@strawberry.type(name="Secret")
class SecretType:
    name: str
    model: strawberry.Private[models.Secret]

    @staticmethod
    def from_model(secret: models.Secret) -> "SecretType":
        return SecretType(name=secret.name, model=secret)

    @strawberry.field
    def content(self, info: Info) -> str:
        return resolvers.resolve_secret_content(_vault(info), self.model)


@strawberry.type(name="Group")
class GroupType:
    name: str
    model: strawberry.Private[models.Group]

    @staticmethod
    def from_model(group: models.Group) -> "GroupType":
        return GroupType(name=group.name, model=group)

    @strawberry.field
    def clients(self, info: Info) -> list[ClientType]:
        return [
            ClientType.from_model(c)
            for c in resolvers.resolve_group_clients(_store(info), self.model)
        ]

    @strawberry.field
    def secrets(self, info: Info) -> list[SecretType]:
        return [
            SecretType.from_model(s)
            for s in resolvers.resolve_group_secrets(_store(info), self.model)
        ]


@strawberry.type
class Query:
    @strawberry.field
    def group(self, info: Info, name: str) -> Optional[GroupType]:
        group = resolvers.resolve_group(_store(info), name)
        return GroupType.from_model(group) if group else None

    @strawberry.field
    def secret(self, info: Info, name: str) -> Optional[SecretType]:
        secret = resolvers.resolve_secret(_store(info), name)
        return SecretType.from_model(secret) if secret else None

    @strawberry.field
    def client(self, info: Info, name: str) -> Optional[ClientType]:
        client = resolvers.resolve_client(_store(info), name)
        return ClientType.from_model(client) if client else None


schema = strawberry.Schema(query=Query)


def create_graphql_router(
    store: DataStore,
    vault: VaultSession,
    graphiql: bool = True,
) -> GraphQLRouter:
    """Create the GraphQL router bound to a store and vault session."""

    async def get_context() -> dict:
        return {"store": store, "vault": vault}

    logger.debug(f"GraphQL router created (graphiql={'on' if graphiql else 'off'})")
    return GraphQLRouter(
        schema,
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
