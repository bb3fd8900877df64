"""
Infrastructure Layer
====================

Concrete repository implementations.

Contains:
- db: MongoDB-backed repositories
- memory: in-process repositories for development and tests
- seed: initial catalogue and customer data
"""
