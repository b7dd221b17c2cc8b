"""
Core comparison framework, declarative ordering contracts and models.

This module contains the foundational building blocks that are independent
of any concrete record type: elements are supplied by the caller's domain.
"""
