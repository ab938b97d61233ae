import graphql
import pytest
from hypothesis import HealthCheck, settings

from graphql_fragments.cache import cached_parse

settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow], deadline=None)
settings.load_profile("default")


SCHEMA = """
type Image {
  url: String
  width: Int
}

type User {
  id: ID
  name: String
  avatar: Image
  friends: [User]
}

type Team {
  id: ID
  members: [User]
}

union Owner = User | Team

type Query {
  user(id: ID): User
  users: [User]
  owner: Owner
}

type Mutation {
  rename(id: ID!, name: String!): User
}

type Subscription {
  userChanged: User
}
"""


DOCUMENT = """
query GetUser {
  user(id: 1) {
    ...UserDetails
  }
}

fragment UserDetails on User {
  id
  ...UserName
  avatar {
    ...ImageFields
  }
}

fragment UserName on User {
  name
}

mutation Rename {
  rename(id: 1, name: "Bob") {
    ...UserName
  }
}

fragment ImageFields on Image {
  url
  width
}

subscription OnChange {
  userChanged {
    id
  }
}
"""


@pytest.fixture(scope="session")
def schema():
    return SCHEMA


@pytest.fixture(scope="session")
def document():
    return cached_parse(DOCUMENT)


@pytest.fixture(scope="session")
def validate_operation():
    def inner(schema, document):
        parsed_schema = graphql.build_schema(schema)
        errors = graphql.validate(parsed_schema, document)
        for error in errors:
            print(error)
        assert not errors, graphql.print_ast(document)
        return document

    return inner
