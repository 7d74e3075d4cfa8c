# Services package init
"""
Deciservice — Services Layer
==============================

What:  Collaborators the route handlers delegate to.

Service Inventory:
    - NotesResource (abstract): CRUD contract for notes
    - SqlNotesResource: NotesResource on async SQLAlchemy
    - Templater: Jinja2 loading and rendering of the browser pages
"""
