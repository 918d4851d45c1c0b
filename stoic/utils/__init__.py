"""
Utility functions module.

Conversion helpers shared by the classifier and sanitizer.

Time Semantics:
- Dates and datetimes become integer epoch milliseconds
- Naive datetimes are treated as UTC
- Bare dates are taken at midnight UTC
"""
