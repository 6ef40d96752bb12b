"""
Projects Domain

Handles projects and the tasks tracked within them.
"""
