"""
Service layer abstraction.

Services encapsulate the SQL for a domain so that API handlers only
deal with schemas and exceptions.
"""
