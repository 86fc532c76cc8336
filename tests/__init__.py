"""Test suite for the sales order application.

- unit/: Unit tests - domain, application, infrastructure and core modules in
  isolation (in-memory adapters, fixed clock, sequential ids)
"""
