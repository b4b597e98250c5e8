"""
GraphQL layer: schema, resolvers, services and mappers
"""
