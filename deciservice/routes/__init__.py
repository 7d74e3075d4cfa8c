# Routes package init
"""
Deciservice — Routes Package
==============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - browser_notes.py:  /notes...        (HTML pages and form posts)
    - notes.py:          /api/notes...    (JSON REST API)
    - health.py:         GET /health      (service health check)

Routes are thin: they extract data from the request, call the notes
resource or templater, and shape the response (status code, headers).
"""
