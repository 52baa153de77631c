"""
Utilities package - schemas, errors and error handlers
"""
