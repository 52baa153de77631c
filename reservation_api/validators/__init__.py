"""
Validators package
"""
