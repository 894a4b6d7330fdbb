"""Domain layer: value types, exact arithmetic, and calendar rules.

This layer depends only on stdlib and pydantic.
It must never import from validators, engine, services, commands, or config.
"""
