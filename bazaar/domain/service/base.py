"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the ledger rules that span posts, votes, comments
    and notifications.
    """

    pass
