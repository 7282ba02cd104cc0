"""
To-Do List — Application Package
==================================

A small task tracker: an HTTP API over a task store, plus a console client
that keeps a local task list in sync with it.

Layout:
    ┌─────────────────────────────────────┐
    │   client/   (Task Client View)      │  ← httpx, local list + pending input
    ├─────────────────────────────────────┤
    │   routes/   (Task API Service)      │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   services/ (Task Store operations) │  ← insert, list, delete
    ├─────────────────────────────────────┤
    │   models/ & schemas/                │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   database.py                       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
