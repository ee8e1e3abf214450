"""Test suite for fortnite-api-io.

Test structure:
- unit/: Endpoint builders, request client, config and facades in isolation
- integration/: HTTP execution against pytest-httpx mocked responses
"""
