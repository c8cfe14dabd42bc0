"""
Core algebra library: capability hierarchy, fold dispatch, witnesses and errors.

This package contains the foundational building blocks that are independent
of any concrete value type (vectors, residues, floating-point numbers).
"""
