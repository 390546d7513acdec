"""
Task implementations behind the CLI commands.

Services are pure Python (no Click dependencies) and take explicit option
values, so they can be tested or reused without going through the CLI.
"""
