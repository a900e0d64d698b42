"""
Pydantic schema definitions for API payloads.

Each entity defines a create schema (what a client may send) and a read
schema (what the store hands back, including the store-assigned id).
"""
