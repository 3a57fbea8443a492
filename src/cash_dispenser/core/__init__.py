"""
Core domain models, errors, contracts and configuration.

This module contains the foundational building blocks that are independent
of the dispensing machinery (selector, inventory, locking).
"""
