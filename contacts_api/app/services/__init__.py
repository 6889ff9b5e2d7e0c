"""
Service layer abstraction.

``ContactService`` encapsulates the business rules for contacts and
talks to the collection only through ``ContactStore``, so the storage
backend can be swapped without changing API handlers.
"""
