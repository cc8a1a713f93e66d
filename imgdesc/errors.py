"""Exceptions raised by imgdesc."""


class ImgdescError(Exception):
    """Base class for all imgdesc errors."""


class InputNotFoundError(ImgdescError):
    """The input path does not exist."""


class UnsupportedFormatError(ImgdescError):
    """A single-file input has an extension outside the supported set."""


class MissingCredentialError(ImgdescError):
    """No API key was supplied for a provider that needs one."""


class ProviderInitError(ImgdescError):
    """The provider client could not be constructed."""


class EmptyResponseError(ImgdescError):
    """The provider returned no text for an image."""
