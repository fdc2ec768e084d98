"""Domain layer — field types, normalization, keystroke and mode rules.

This layer depends only on stdlib and pydantic.
It must never import from services, enforcement, plugins, commands, or config.
"""
