"""Service layer — validation, counter rendering, and CLI-facing operations.

Services may import from domain, enforcement, and infrastructure layers.
They must never import from commands, output, or plugins.
"""
