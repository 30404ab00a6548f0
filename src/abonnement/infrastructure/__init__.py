"""
Infrastructure layer - persistence and monitoring adapters.
"""
