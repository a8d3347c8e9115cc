"""
Account and identity module for the OrganLink API.

This module provides:
- Caller identity resolution from bearer tokens
- Re-reading the caller's stored account on every request
- Role-gated dependencies shared by every router
- First-login role selection
"""
