from collections.abc import Collection
from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLDirective,
    GraphQLField,
    GraphQLFieldResolver,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    GraphQLUnionType,
    specified_directives,
)

from fedsdl import log
from fedsdl.federation.names import (
    RESERVED_ARGUMENT_REPRESENTATIONS,
    RESERVED_FIELD_ENTITIES,
    RESERVED_FIELD_SDL,
    RESERVED_FIELD_SERVICE,
    RESERVED_TYPE_ENTITY,
)
from fedsdl.federation.types import ANY_TYPE, FEDERATION_DIRECTIVES, SERVICE_TYPE, EntityObjectType, is_entity_type
from fedsdl.printer.schema import print_schema


class FederatedSchema(GraphQLSchema):
    """
    GraphQL schema extended with the Apollo Federation (v1) subgraph machinery.

    On top of the given types it registers the federation directives, the `_Any`
    scalar and the `_Service` type, and adds `_service` to the query type, in place. When the
    schema holds entity types, the `_Entity` union and the `_entities` query field
    are added as well.

    Args:
        query: The query root type
        mutation: The mutation root type
        subscription: The subscription root type
        types: Additional named types, e.g. entities not reachable from the roots
        directives: Additional directives
        entities_resolver: Resolver for `_entities(representations: ...)`
        **kwargs: Remaining `GraphQLSchema` arguments
    """

    entity_types: dict[str, EntityObjectType]

    def __init__(
        self,
        query: GraphQLObjectType,
        mutation: GraphQLObjectType | None = None,
        subscription: GraphQLObjectType | None = None,
        types: Collection[GraphQLNamedType] | None = None,
        directives: Collection[GraphQLDirective] | None = None,
        entities_resolver: GraphQLFieldResolver | None = None,
        **kwargs: Any,
    ) -> None:
        user_types = list(types or [])
        # Collect entities from everything reachable before the query type is extended
        base_schema = GraphQLSchema(query, mutation, subscription, user_types)
        entity_types = {
            type_name: type_
            for type_name, type_ in sorted(base_schema.type_map.items())
            if is_entity_type(type_)
        }
        log.debug(f"Found {len(entity_types)} entity types: {', '.join(entity_types) or '-'}")

        meta_types: list[GraphQLNamedType] = [ANY_TYPE, SERVICE_TYPE]
        entity_union = None
        if entity_types:
            entity_union = GraphQLUnionType(RESERVED_TYPE_ENTITY, types=lambda: list(entity_types.values()))
            meta_types.append(entity_union)

        self._extend_query_type(query, entity_union, entities_resolver)

        all_directives = [*specified_directives, *FEDERATION_DIRECTIVES]
        known_directive_names = {directive.name for directive in all_directives}
        all_directives.extend(
            directive for directive in (directives or []) if directive.name not in known_directive_names
        )

        super().__init__(
            query=query,
            mutation=mutation,
            subscription=subscription,
            types=[*user_types, *meta_types],
            directives=all_directives,
            **kwargs,
        )
        self.entity_types = entity_types

    def has_entity_types(self) -> bool:
        return bool(self.entity_types)

    def _extend_query_type(
        self,
        query: GraphQLObjectType,
        entity_union: GraphQLUnionType | None,
        entities_resolver: GraphQLFieldResolver | None,
    ) -> None:
        # Extended in place: other types (e.g. mutation payloads) may reference the query type
        fields = query.fields
        fields.pop(RESERVED_FIELD_SERVICE, None)
        fields.pop(RESERVED_FIELD_ENTITIES, None)

        fields[RESERVED_FIELD_SERVICE] = GraphQLField(GraphQLNonNull(SERVICE_TYPE), resolve=self._resolve_service)
        if entity_union is not None:
            fields[RESERVED_FIELD_ENTITIES] = GraphQLField(
                GraphQLNonNull(GraphQLList(entity_union)),
                args={
                    RESERVED_ARGUMENT_REPRESENTATIONS: GraphQLArgument(
                        GraphQLNonNull(GraphQLList(GraphQLNonNull(ANY_TYPE)))
                    )
                },
                resolve=entities_resolver,
            )

    def _resolve_service(self, _root: Any, _info: GraphQLResolveInfo) -> dict[str, str]:
        return {RESERVED_FIELD_SDL: print_schema(self)}
