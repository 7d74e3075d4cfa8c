"""
Deciservice — Notes Web Service
=================================

A notes service with two surfaces over one Note resource:

    ┌─────────────────────────────────────┐
    │  Routes: browser pages │ REST API   │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Templater (Jinja2)                │  ← HTML rendering
    ├─────────────────────────────────────┤
    │   Notes resource (interface)        │  ← CRUD contract
    ├─────────────────────────────────────┤
    │   SQL notes resource + ORM model    │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
