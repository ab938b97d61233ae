# pylint: disable=unused-import
from .documents import create_document_from_query, get_fragment_definitions, get_query_definitions
from .errors import CyclicFragmentReference, FragmentResolutionError, MissingFragmentDefinition
from .fragments import FragmentResolver, bundle_operation, get_fragment_names
from .predicates import (
    is_executable_operation,
    is_field,
    is_fragment_definition,
    is_fragment_spread,
    is_inline_fragment,
    is_mutation_definition,
    is_operation_definition,
    is_query_definition,
    is_subscription_definition,
)
