"""
Employees Domain

Handles employee records and their monthly salary history.
"""
