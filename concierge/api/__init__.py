"""
API module.

FastAPI application and routers for the borrower chat.
"""
