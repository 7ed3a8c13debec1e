"""Service layer: envelope resolution, method naming, CLI result contract.

Services may import from domain, config, and infrastructure layers.
They must never import from commands or output.
"""
