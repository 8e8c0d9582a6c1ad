# Routes package init
"""
Note Store: API Routes Package
==============================

Route Inventory:
    - notes.py:   GET/PUT/DELETE /notes/{name}, GET /notes, POST /write
    - pages.py:   GET /, GET /UploadForm.html
    - health.py:  GET /health

Routes stay thin: pull parameters from the request, call NoteStore,
wrap the result in a response. Error responses come from the global
exception handlers in main.py.
"""
