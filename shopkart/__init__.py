"""
ShopKart — product catalogue web service.

Application package root. The catalogue routes, persistence and business
rules live with their owning teams; this package provides the pieces every
one of them shares:

Layers:
    - domain: Framework-free errors raised by product business logic.
    - shared: Cross-cutting concerns (error responses, logging).
    - core: Configuration.
"""
