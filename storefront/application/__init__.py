"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (check eligibility, pay order, list pages)
- Services: Application services that coordinate multiple use cases
- Eligibility: Ordered purchase rules evaluated by the eligibility engine
"""
