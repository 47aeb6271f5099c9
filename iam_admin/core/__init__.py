"""Core client logic.

Module Structure:
    - user_admin/   : User-admin API client (roles, users, reference data)
    - validators.py : Field rules and aggregated request validation
"""
