"""End-to-end tests for the GraphQL schema."""
import dataclasses

import pytest

from vaultql.api.graphql import schema
from vaultql.db import Client, DataStore, Group, Secret


def execute(query, store, vault, variables=None):
    return schema.execute_sync(
        query,
        variable_values=variables,
        context_value={"store": store, "vault": vault},
    )


class TestQueries:

    def test_secret_content_is_decrypted(self, store, vault):
        result = execute('{ secret(name: "secret1") { name content } }', store, vault)
        assert result.errors is None
        assert result.data == {"secret": {"name": "secret1", "content": "secret1"}}

    def test_group_members_in_store_order(self, store, vault):
        result = execute(
            '{ group(name: "group1") { name clients { name } secrets { name } } }',
            store,
            vault,
        )
        assert result.errors is None
        assert result.data == {
            "group": {
                "name": "group1",
                "clients": [{"name": "client1"}, {"name": "client2"}],
                "secrets": [{"name": "secret1"}, {"name": "secret2"}],
            }
        }

    def test_group_secret_contents(self, store, vault):
        result = execute(
            '{ group(name: "group1") { secrets { name content } } }', store, vault
        )
        assert result.errors is None
        assert result.data["group"]["secrets"] == [
            {"name": "secret1", "content": "secret1"},
            {"name": "secret2", "content": "secret2"},
        ]

    def test_client(self, store, vault):
        result = execute('{ client(name: "client2") { name } }', store, vault)
        assert result.data == {"client": {"name": "client2"}}

    def test_variables(self, store, vault):
        result = execute(
            'query Lookup($name: String!) { secret(name: $name) { content } }',
            store,
            vault,
            variables={"name": "secret2"},
        )
        assert result.data == {"secret": {"content": "secret2"}}

    @pytest.mark.parametrize("field", ["group", "secret", "client"])
    def test_unknown_name_is_null(self, store, vault, field):
        result = execute(f'{{ {field}(name: "nope") {{ name }} }}', store, vault)
        assert result.errors is None
        assert result.data == {field: None}

    def test_name_argument_is_required(self, store, vault):
        result = execute('{ secret { name } }', store, vault)
        assert result.errors


class TestDanglingGroups:

    def test_missing_members_are_skipped(self, vault):
        store = DataStore(
            clients=[Client(name="client1")],
            secrets=[],
            groups=[
                Group(
                    name="group1",
                    client_names=frozenset({"client1", "ghost"}),
                    secret_names=frozenset({"lost"}),
                ),
            ],
        )
        result = execute(
            '{ group(name: "group1") { clients { name } secrets { name } } }',
            store,
            vault,
        )
        assert result.errors is None
        assert result.data == {"group": {"clients": [{"name": "client1"}], "secrets": []}}


class TestIntegrityFailures:

    @pytest.fixture
    def tampered_store(self, vault):
        blob = vault.encrypt("secret1")
        bad = dataclasses.replace(
            blob, ciphertext=bytes([blob.ciphertext[0] ^ 0x01]) + blob.ciphertext[1:]
        )
        return DataStore(
            secrets=[
                Secret(name="secret1", content=bad),
                Secret(name="secret2", content=vault.encrypt("secret2")),
            ],
        )

    def test_error_is_reported_for_content(self, tampered_store, vault):
        result = execute('{ secret(name: "secret1") { name content } }', tampered_store, vault)
        assert result.data == {"secret": None}
        assert len(result.errors) == 1
        assert result.errors[0].message == "Secret content failed integrity verification"
        assert result.errors[0].path == ["secret", "content"]

    def test_name_alone_still_resolves(self, tampered_store, vault):
        result = execute('{ secret(name: "secret1") { name } }', tampered_store, vault)
        assert result.errors is None
        assert result.data == {"secret": {"name": "secret1"}}

    def test_other_secrets_unaffected(self, tampered_store, vault):
        result = execute('{ secret(name: "secret2") { content } }', tampered_store, vault)
        assert result.errors is None
        assert result.data == {"secret": {"content": "secret2"}}


class TestSchema:

    def test_sdl(self):
        sdl = str(schema)
        assert "group(name: String!): Group" in sdl
        assert "secret(name: String!): Secret" in sdl
        assert "client(name: String!): Client" in sdl
        assert "clients: [Client!]!" in sdl
        assert "secrets: [Secret!]!" in sdl
        assert "content: String!" in sdl
