"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services coordinate the pure progression rules with the
    repositories and the sync log. They never hold user state between calls.
    """

    pass
