"""
Shared utilities: validation, formatting and logging decorators.
"""
