"""
Domain layer package.

Contains the error conditions product business logic may raise.
This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""
