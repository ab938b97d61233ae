from functools import lru_cache

import graphql


@lru_cache(maxsize=32)
def cached_parse(source: str) -> graphql.DocumentNode:
    return graphql.parse(source)
