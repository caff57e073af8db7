"""Domain layer for the travel planner accounts.

Business rules for user accounts, decoupled from persistence and from any
transport adapter.
"""
