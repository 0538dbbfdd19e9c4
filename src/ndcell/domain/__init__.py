"""
Domain layer: backend-agnostic interfaces, element types, options and errors.
"""
