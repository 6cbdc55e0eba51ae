"""
Todo app - The task list exposed over GraphQL.

Layers:
- models: the Task table
- repository: persistence handle injected into services
- services: list / create / mark done / delete
- scalars + schema: the GraphQL contract served at /graphql/
"""
