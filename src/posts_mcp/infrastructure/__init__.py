"""Infrastructure Layer.

HTTP transport, API client and repository implementations.
"""
