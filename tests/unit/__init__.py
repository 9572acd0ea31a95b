"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_merge_sort.py: Merge sort and comparators
    - test_binary_search.py: Identifier lookup
    - test_record_store.py: Record store and people parsing
    - test_propagation_engine.py: Transmission model and propagation
    - test_reporting.py: Tier classification and output rendering
    - test_config_loader.py: Configuration loading/validation
    - test_adapters.py: Line reader and metrics collector
"""
