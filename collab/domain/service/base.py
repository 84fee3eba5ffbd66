"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that span entities, such as
    invitation deduplication or version numbering.
    """

    pass
