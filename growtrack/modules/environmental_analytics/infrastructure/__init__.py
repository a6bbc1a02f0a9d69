"""
Environmental Analytics Infrastructure Layer
"""
