"""Exceptions raised by pkgcreate."""


class PackageCreateError(Exception):
    """Base class for errors reported to the user by the CLI"""


class PackageExistsError(PackageCreateError):
    """Raise when the destination package directory already exists"""


class TemplatesRootError(PackageCreateError):
    """Raise when the templates root directory cannot be used"""


class ConfigError(PackageCreateError):
    """Raise when the workspace configuration file is malformed"""


class InvalidOptionsError(PackageCreateError):
    """Raise when package options fail validation"""
