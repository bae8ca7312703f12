"""
Standup Notes Backend - Services Layer
======================================

What:  Logic between routes (HTTP) and the store / completion provider.

Service Inventory:
    - NoteService: CRUD and day-window reads on `notes`
    - SummaryService: CRUD on `summaries` and standup summary generation
    - CompletionService (abstract): chat-style text generation interface
    - GeminiService: CompletionService backed by Google Gemini

Services raise application exceptions (exceptions.py); they never build
HTTP responses.
"""
