"""Exceptions raised by the trajectory engine."""


class OdeGalleryError(Exception):
    """Base class for odegallery errors."""


class UnknownModelError(OdeGalleryError, LookupError):
    """Raised when a model id is not present in the catalog."""

    def __init__(self, model_id: str, known: tuple = ()) -> None:
        self.model_id = model_id
        self.known = tuple(known)
        msg = f"Unknown model id {model_id!r}"
        if self.known:
            msg += f" (known: {', '.join(self.known)})"
        super().__init__(msg)


class NumericDomainError(OdeGalleryError, ArithmeticError):
    """Raised when a closed form or an integration step leaves its valid domain."""


__all__ = ["OdeGalleryError", "UnknownModelError", "NumericDomainError"]
