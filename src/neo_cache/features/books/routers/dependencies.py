"""Book router dependencies.

The application overrides these placeholders with its configured
instances through ``app.dependency_overrides``.
"""


def get_book_service():
    """Placeholder for book service dependency.

    Applications should override this to provide a configured service.
    """
    raise NotImplementedError(
        "Applications must provide their own book service dependency"
    )
