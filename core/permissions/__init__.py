"""
Role-based permissions: role registry, permission matrix and self-scope guards.
"""
