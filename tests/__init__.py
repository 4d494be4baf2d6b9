"""
create-tresjs test suite
========================

Test Modules
------------
- test_naming.py: Project name validation
- test_catalog.py: Ecosystem package catalog
- test_models.py: Pydantic models and enums
- test_manifest.py: package.json merge rules
- test_generator.py: Project materialization
- test_prompts.py: Interactive question flow (questionary mocked)
- test_cli.py: Command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_manifest.py

    # Run specific test class
    pytest tests/test_generator.py::TestMaterialize
"""
