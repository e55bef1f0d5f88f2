"""
Background fill web service package.

Exposes the remove.bg client, background asset lookup, compositing and tint
primitives, and the FastAPI application that serves them.
"""
