"""Domain layer — frontmatter model, parsing, and tag transforms.

This layer depends only on stdlib, pydantic, and ruamel.yaml.
It must never import from services, infrastructure, commands, or config.
"""
