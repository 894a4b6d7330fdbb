"""Service layer: engine calls wrapped in ServiceResult.

Services may import from domain, engine, and infrastructure layers.
They must never import from commands or output.
"""
