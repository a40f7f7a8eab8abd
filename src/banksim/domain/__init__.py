"""Domain layer — account rules, amounts, and notification hooks.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, output, or config.
"""
