"""
Deciservice — Media Types
===========================

Vendor media types accepted and sent by the REST notes API. Versioned so a
v2 representation can be served side by side without breaking v1 clients.
"""

NOTES_V1_JSON = "application/x-deciservice-v1-notes+json"
NOTE_V1_JSON = "application/x-deciservice-v1-note+json"
