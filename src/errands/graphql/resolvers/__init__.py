"""Resolver package for the GraphQL schema.

Each module reads or mutates the store found in the GraphQL context and
converts store records into the GraphQL types declared under ``types``.
"""
