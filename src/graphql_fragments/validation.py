import graphql

from .cache import cached_parse
from .types import DocumentInput


def maybe_parse_document(document: DocumentInput) -> graphql.DocumentNode:
    if isinstance(document, str):
        return cached_parse(document)
    if isinstance(document, graphql.DocumentNode):
        return document
    raise TypeError(f"Expected a query string or `graphql.DocumentNode`, got {document.__class__.__name__}")
