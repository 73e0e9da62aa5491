"""
Core Module
===========

Errors and logging setup.
"""
