"""Collecting fragments that a selection set depends on.

A fragment spread may point to a fragment that spreads other fragments, so the full set of fragment
definitions needed to send an operation is the transitive closure over spreads found in nested fields,
inline fragments and fragment definitions themselves.
"""
import logging
from typing import Dict, FrozenSet, Optional, Tuple

import attr
import graphql

from .documents import get_fragment_definitions
from .errors import CyclicFragmentReference, MissingFragmentDefinition
from .predicates import is_field, is_fragment_definition, is_fragment_spread, is_inline_fragment
from .types import DocumentInput, FragmentNames, FragmentTable
from .validation import maybe_parse_document

logger = logging.getLogger(__name__)


@attr.s(slots=True)
class FragmentResolver:
    """Resolves fragment names against fragment definitions of a single document."""

    fragments: FragmentTable = attr.ib()
    # The document is assumed to be immutable, therefore a fragment is expanded at most once per resolver
    _resolved: Dict[str, FrozenSet[str]] = attr.ib(factory=dict, init=False)

    @classmethod
    def from_document(cls, document: DocumentInput) -> "FragmentResolver":
        return cls(get_fragment_definitions(document))

    def names(
        self, selection_set: Optional[graphql.SelectionSetNode], path: Tuple[str, ...] = ()
    ) -> FragmentNames:
        """Names of all fragments reachable from the given selection set.

        :param selection_set: Selection set to inspect. Leaf fields have none.
        :param path: Fragments that are being expanded at the moment, outermost first.
        """
        names: FragmentNames = set()
        if selection_set is None or not selection_set.selections:
            return names
        for selection in selection_set.selections:
            if is_fragment_spread(selection):
                name = selection.name.value
                names.add(name)
                names.update(self.expand(name, path))
            elif is_inline_fragment(selection) or is_field(selection):
                names.update(self.names(selection.selection_set, path))
            # Other selection kinds don't reference fragments
        return names

    def expand(self, name: str, path: Tuple[str, ...] = ()) -> FrozenSet[str]:
        """Names of fragments reachable from the definition of the given fragment."""
        if name in path:
            cycle = path[path.index(name) :] + (name,)
            logger.debug("Fragment cycle detected: %s", " -> ".join(cycle))
            raise CyclicFragmentReference(cycle)
        resolved = self._resolved.get(name)
        if resolved is not None:
            return resolved
        definition = self.fragments.get(name)
        if definition is None:
            logger.debug("Fragment %r is spread but not defined", name)
            raise MissingFragmentDefinition(name)
        resolved = frozenset(self.names(definition.selection_set, path + (name,)))
        self._resolved[name] = resolved
        return resolved


def get_fragment_names(selection_set: Optional[graphql.SelectionSetNode], document: DocumentInput) -> FragmentNames:
    """Names of fragments that the selection set depends on, directly or transitively.

    :param selection_set: Selection set to inspect. `None` gives an empty set.
    :param document: Document with fragment definitions as a string or `graphql.DocumentNode`.
    :raises MissingFragmentDefinition: If a spread fragment is not defined in the document.
    :raises CyclicFragmentReference: If fragments spread each other in a loop.
    """
    if selection_set is None or not selection_set.selections:
        return set()
    names = FragmentResolver.from_document(document).names(selection_set)
    logger.debug("Resolved %d fragment(s): %s", len(names), ", ".join(sorted(names)))
    return names


def bundle_operation(operation: graphql.OperationDefinitionNode, document: DocumentInput) -> graphql.DocumentNode:
    """Create a document with the operation and all fragment definitions it needs.

    Fragment definitions keep the order they have in the source document.
    """
    document = maybe_parse_document(document)
    resolver = FragmentResolver.from_document(document)
    names = resolver.names(operation.selection_set)
    fragments = [
        definition
        for definition in document.definitions
        if is_fragment_definition(definition)
        and definition.name.value in names
        # Shadowed definitions with the same name are skipped
        and resolver.fragments[definition.name.value] is definition
    ]
    logger.debug("Bundling operation with %d fragment definition(s)", len(fragments))
    return graphql.DocumentNode(kind="document", definitions=[operation, *fragments])
