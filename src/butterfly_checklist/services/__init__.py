"""Shared service utilities.

  - http: ``requests`` session with retry/backoff used by the source fetcher
"""
