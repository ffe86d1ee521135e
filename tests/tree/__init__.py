"""
Tests for the shrink tree core.

Test organization:
- test_models.py: Tree construction, map/chain, force and StrictTree
- test_distribution.py: dist, dist_array, fair_pair, left_first_pair
- test_search.py: left_first_search and fuel accounting
- test_shrinks.py: Shrink functions and unfold
"""
