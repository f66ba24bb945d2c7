"""
Interfaces layer package.

Contains the FastAPI router, the request payload schema,
and input validation. No business logic belongs here.
Routes call use cases and return responses.
"""
