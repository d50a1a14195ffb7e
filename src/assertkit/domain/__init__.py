"""Domain layer: value rendering and class-descriptor introspection.

This layer depends only on the standard library.
It must never import from catalogue, dispatch, plugins, or config.
"""
