"""
Infrastructure layer.

Configuration and the in-memory repository implementations of the
application contracts.
"""
