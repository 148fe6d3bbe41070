"""
Pipeline functions for trainer business logic.

Stateless orchestration between routers and services.
"""
