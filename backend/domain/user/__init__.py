"""User domain module.

This domain manages account identity for the travel planner: registration,
credential verification, password rotation and profile (nickname, image) changes.
Passwords are stored only as one-way hashes; sessions are stateless bearer tokens.
"""
