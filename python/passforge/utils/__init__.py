"""
Core utilities: password generation, strength scoring and input validation.
"""
