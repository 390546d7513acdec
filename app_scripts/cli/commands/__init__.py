"""
CLI command modules.

Each module defines one Click command that builds its option values and
hands them to the matching service.
"""
