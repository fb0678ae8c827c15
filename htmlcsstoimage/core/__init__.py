"""
Core Module
===========

Request mapping, signing and transport.

Components:
- normalizers: Measurement and font-list normalization
- mapper: Public request to wire request mapping
- signing: Signed template and create-and-render URLs
- transport: Transport contract and the default aiohttp transport
"""
