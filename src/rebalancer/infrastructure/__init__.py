"""
Infrastructure adapters for external data.
"""
