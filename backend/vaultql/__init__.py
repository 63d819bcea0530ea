"""vaultql - GraphQL server for groups, clients, and sealed secrets."""

__version__ = "0.1.0"
