"""Domain layer — instants, input classification, and operations.

This layer depends only on the standard library.
It must never import from services, output, commands, or config.
"""
