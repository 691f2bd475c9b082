"""
Performance tests for gltypes.

Tests:
- test_perf_transforms.py - Closed-form TRS builders against chained products and general inversion
"""
