from typing import Dict, Set, Union

import graphql

FragmentNames = Set[str]
FragmentTable = Dict[str, graphql.FragmentDefinitionNode]
DocumentInput = Union[str, graphql.DocumentNode]
