"""Workflows sitting between routers and the database."""
