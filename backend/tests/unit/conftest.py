"""Unit test configuration.

Unit tests do not depend on app.py or external services. Shared fakes
live in the parent conftest.
"""
