"""Classifiers for top-level definitions and selections.

All of them are total - a node of any other kind simply gives `False`.
"""
import graphql


def is_operation_definition(definition: graphql.DefinitionNode) -> bool:
    """Whether the definition is a query, mutation or subscription."""
    return isinstance(definition, graphql.OperationDefinitionNode)


def is_fragment_definition(definition: graphql.DefinitionNode) -> bool:
    return isinstance(definition, graphql.FragmentDefinitionNode)


def _is_operation_of_type(definition: graphql.DefinitionNode, operation: graphql.OperationType) -> bool:
    return is_operation_definition(definition) and definition.operation == operation  # type: ignore


def is_query_definition(definition: graphql.DefinitionNode) -> bool:
    return _is_operation_of_type(definition, graphql.OperationType.QUERY)


def is_mutation_definition(definition: graphql.DefinitionNode) -> bool:
    return _is_operation_of_type(definition, graphql.OperationType.MUTATION)


def is_subscription_definition(definition: graphql.DefinitionNode) -> bool:
    return _is_operation_of_type(definition, graphql.OperationType.SUBSCRIPTION)


def is_executable_operation(definition: graphql.DefinitionNode) -> bool:
    """Whether the definition is an operation of one of the known types."""
    return (
        is_query_definition(definition)
        or is_mutation_definition(definition)
        or is_subscription_definition(definition)
    )


def is_field(selection: graphql.SelectionNode) -> bool:
    return isinstance(selection, graphql.FieldNode)


def is_fragment_spread(selection: graphql.SelectionNode) -> bool:
    return isinstance(selection, graphql.FragmentSpreadNode)


def is_inline_fragment(selection: graphql.SelectionNode) -> bool:
    return isinstance(selection, graphql.InlineFragmentNode)
