"""
Shared utilities for the stream rules client.

This package aggregates common building blocks consumed by the client:

- config: Client configuration via pydantic-settings
- logging: Structured logging with operation correlation
- errors: Canonical error types and error payloads
- test_helpers: Payload and response factories for tests

Do not import from service_* packages into shared/.
"""
