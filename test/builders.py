import graphql


def make_selection_set(*selections):
    return graphql.SelectionSetNode(kind="selection_set", selections=list(selections))


def make_spread(name):
    return graphql.FragmentSpreadNode(name=graphql.NameNode(value=name))


def make_fragment(name, *selections):
    return graphql.FragmentDefinitionNode(
        name=graphql.NameNode(value=name),
        type_condition=graphql.NamedTypeNode(name=graphql.NameNode(value="User")),
        selection_set=make_selection_set(*selections),
    )


def make_operation(operation, *selections):
    return graphql.OperationDefinitionNode(operation=operation, selection_set=make_selection_set(*selections))
