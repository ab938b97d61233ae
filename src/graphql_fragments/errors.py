from typing import Tuple


class FragmentResolutionError(ValueError):
    """The document does not contain a consistent set of fragment definitions."""


class MissingFragmentDefinition(FragmentResolutionError):
    """A fragment spread refers to a fragment that is not defined in the document."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Unknown fragment "{name}"')


class CyclicFragmentReference(FragmentResolutionError):
    """A fragment spreads itself, directly or through other fragments.

    `path` lists the fragments along the cycle, the first one is repeated at the end.
    """

    def __init__(self, path: Tuple[str, ...]) -> None:
        self.path = path
        super().__init__(f'Cannot spread fragment "{path[0]}" within itself via {" -> ".join(path)}')
