"""
Services module for business logic separation.

This module contains service classes that encapsulate logic which is neither
HTTP handling nor storage access.
"""
