"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: Customer, Order, Product and the Page container
- Repository Interfaces: Abstract contracts for data access
- Exceptions: Error taxonomy raised by the application layer
"""
