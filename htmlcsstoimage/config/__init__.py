"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Credentials, service URL and runtime settings (HCTI_ environment variables)
- logging: Structured logging configuration
"""
