"""
Core domain layer: models, enums, exceptions and shared utilities.
"""
