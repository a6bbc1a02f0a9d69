"""
GrowTrack feature modules.
"""
