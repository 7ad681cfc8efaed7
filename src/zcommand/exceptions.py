"""Exceptions raised by z-command."""


class ZCommandError(Exception):
    """Base class for z-command errors."""


class TemplatesNotFoundError(ZCommandError):
    """Neither a local templates directory nor a templates.zip was found."""


class UnknownPlatformError(ZCommandError):
    """The requested target platform is not registered."""


class UpdateError(ZCommandError):
    """The self-update process failed or could not be started."""


class VersionBumpError(ZCommandError):
    """The project version could not be read or bumped."""
