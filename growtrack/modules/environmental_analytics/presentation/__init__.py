"""
Environmental Analytics Presentation Layer
"""
