"""
Info Validator — fixed-format predicates for form-input data.

Usernames, passwords, mobile numbers, emails, Chinese text, national ID
numbers (with check character), URLs, IP octets, school codes and vehicle
license plates.  Every predicate is pure and returns a bool.
"""

__version__ = "1.0.0"
