from importlib import metadata

# This variable is intended to be overwritten during the build/release process
__version__ = "test"

def get_version() -> str:
    """
    Returns the current version of the application.
    Priorities:
    1. Explicitly set __version__ (if not "test")
    2. Installed distribution metadata
    3. Fallback "test"
    """
    if __version__ != "test":
        return __version__

    try:
        return metadata.version("serverinfo")
    except metadata.PackageNotFoundError:
        pass

    return "test"
