"""
Core formatting package for the math display formatter.
"""
