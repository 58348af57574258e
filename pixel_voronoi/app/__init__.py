"""
Presentation layer: pygame window, key mapping and PNG export.
"""
