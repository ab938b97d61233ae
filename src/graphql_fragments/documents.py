from typing import List

import graphql

from .predicates import is_executable_operation, is_fragment_definition
from .types import DocumentInput, FragmentTable
from .validation import maybe_parse_document


def create_document_from_query(definition: graphql.OperationDefinitionNode) -> graphql.DocumentNode:
    """Wrap a single operation into a top-level document node."""
    return graphql.DocumentNode(kind="document", definitions=[definition])


def get_query_definitions(document: DocumentInput) -> List[graphql.OperationDefinitionNode]:
    """Queries, mutations and subscriptions of the document in their original order."""
    document = maybe_parse_document(document)
    return [definition for definition in document.definitions if is_executable_operation(definition)]


def get_fragment_definitions(document: DocumentInput) -> FragmentTable:
    """Map fragment names to their definitions.

    Fragment names are not validated for uniqueness, the last definition with a given name wins.
    """
    document = maybe_parse_document(document)
    return {
        definition.name.value: definition
        for definition in document.definitions
        if is_fragment_definition(definition)
    }
