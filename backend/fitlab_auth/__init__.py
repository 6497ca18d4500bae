"""
FitLab Auth Backend.
"""
__version__ = "0.1.0"
