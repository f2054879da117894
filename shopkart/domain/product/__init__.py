"""
Product bounded context — domain layer.

Only the error contract is defined here: handlers, services and
repositories raise these errors and the shared error responder
turns them into HTTP responses.
"""
