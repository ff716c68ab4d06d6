"""Infrastructure layer — file discovery and text I/O.

This layer depends on stdlib only.
It must never import from services, commands, or output.
"""
