"""GraphQL query service over the sneaker store."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLInt,
    GraphQLList,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLString,
    graphql_sync,
)
from graphql.utilities import value_from_ast_untyped

from .models import Sneaker
from .store import SneakerStore


def _identity(value: Any) -> Any:
    return value


def _parse_id_literal(value_node, variables=None) -> Any:
    return value_from_ast_untyped(value_node, variables)


# Accepts any literal so that a badly typed id resolves to "not found"
# instead of failing validation.
SneakerIdType = GraphQLScalarType(
    name="SneakerId",
    description="Sneaker id; values that are not integers match nothing.",
    serialize=_identity,
    parse_value=_identity,
    parse_literal=_parse_id_literal,
)

SneakerType = GraphQLObjectType(
    name="Sneaker",
    fields={
        "id": GraphQLField(GraphQLInt),
        "title": GraphQLField(GraphQLString),
        "price": GraphQLField(GraphQLString),
        "date": GraphQLField(GraphQLString),
        "image": GraphQLField(GraphQLString),
        "provider": GraphQLField(GraphQLString),
    },
)


def decode_sneaker_id(value: Any) -> Optional[int]:
    """Return ``value`` as an id, or ``None`` when it is not an integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def resolve_sneaker(store: SneakerStore, info, **args) -> Sneaker:
    sneaker_id = decode_sneaker_id(args.get("id"))
    if sneaker_id is not None:
        found = store.get(sneaker_id)
        if found is not None:
            return found
    return Sneaker()


def resolve_sneaker_list(store: SneakerStore, info, **args) -> List[Sneaker]:
    return store.all()


def build_schema() -> GraphQLSchema:
    root_query = GraphQLObjectType(
        name="RootQuery",
        fields={
            "sneaker": GraphQLField(
                SneakerType,
                description="Get single sneaker",
                args={"id": GraphQLArgument(SneakerIdType)},
                resolve=resolve_sneaker,
            ),
            "sneakerList": GraphQLField(
                GraphQLList(SneakerType),
                description="List of sneakers",
                resolve=resolve_sneaker_list,
            ),
        },
    )
    return GraphQLSchema(query=root_query)


def execute_query(schema: GraphQLSchema, query: str, store: SneakerStore) -> Dict[str, Any]:
    """Run ``query`` against ``store``.

    Syntax, validation and resolver errors end up in the ``errors`` list of the
    returned document; nothing is raised.
    """
    result = graphql_sync(schema, query or "", root_value=store)
    document: Dict[str, Any] = {"data": result.data}
    if result.errors:
        messages = [error.message for error in result.errors]
        print(f"[QueryService] wrong result, unexpected errors: {messages}")
        document["errors"] = [error.formatted for error in result.errors]
    return document
