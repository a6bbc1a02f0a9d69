"""
Environmental Analytics API
"""
