# tests/__init__.py
"""
Test suite for the Task Manager API.

Organization:
- `test_*_api`: HTTP tests against an in-memory app, one module per resource.
- `test_services`, `test_schemas`, `test_security`: units below the HTTP layer.
- `test_client`, `test_manage`: the Python client and the command line.
"""
