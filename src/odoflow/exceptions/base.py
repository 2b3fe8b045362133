from __future__ import annotations


class OdoflowError(Exception):
    """Base exception class for all odoflow errors.

    Everything odoflow raises on purpose derives from this class, so the CLI
    boundary can catch one type and let genuine programming errors surface.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            await ComponentWorkflows(services).delete(None)
        except OdoflowError as e:
            click.echo(f"Error: {e.message}", err=True)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the OdoflowError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
