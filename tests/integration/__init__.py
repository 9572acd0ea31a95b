"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that all components work together correctly,
reading real files from fixtures/data and writing to tmp_path.

Test Files:
    - test_detection_pipeline.py: Full detection workflow
    - test_cli.py: Command line entry point and exit status
"""
