"""Editor exceptions."""


class EditorPreconditionError(TypeError):
    """Raised when an editing session is started with invalid arguments."""
