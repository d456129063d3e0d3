"""
Lending concierge chat backend.

Borrower-facing AI chat on top of a persisted chat session lifecycle.
"""
