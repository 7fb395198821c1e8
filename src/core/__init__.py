"""
Core domain models, configuration, contracts and errors.

This module contains the foundational building blocks that are independent
of the folding data and the comparison engine (code points, locale tags,
orderings, error taxonomy).
"""
