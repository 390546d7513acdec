"""
Support scripts for hybrid Angular/Cordova mobile app projects.
"""
__version__ = "0.1.0"
