"""
Environmental Analytics Domain Layer

Value types, pure analytics services and repository interfaces.
"""
