"""Exception type shared by the whole package."""


class DoksError(Exception):
    """Raised when a .doks project, partition or command cannot proceed."""