"""
Standup Notes Backend - Application Package
===========================================

What:  Package root for the standup notes HTTP service.
How:   Layered like this:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (notes, summaries,     │  ← Store calls, prompt building
    │      completion provider)           │
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

Routes never talk to the database or to the completion provider directly;
services never build HTTP responses.
"""

__version__ = "1.0.0"
