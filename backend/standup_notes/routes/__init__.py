"""
Standup Notes Backend - API Routes Package
==========================================

Route Inventory:
    - notes.py:      GET/POST /notes, PUT/DELETE /notes/{id},
                     GET /notes/today, GET /notes/yesterday
    - summaries.py:  GET/POST /summaries, PUT/DELETE /summaries/{id},
                     POST /summaries/standup-summary
    - health.py:     GET /health

Routes stay thin: pull values out of the request, call a service, pick the
status code.
"""
