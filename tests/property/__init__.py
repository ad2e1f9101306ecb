"""
SCRIPTURA - Property-Based Testing Suite

Property-based testing using Hypothesis to check invariants of book name
resolution, bounds checking and reference parsing.
"""
