"""HTTP and GraphQL API for vaultql."""
