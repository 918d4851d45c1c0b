"""
Sanitization core: classification, cycle tracking and the recursive sanitizer.
"""
