"""
Core infrastructure: errors, settings, logging and list defaulting.
"""
