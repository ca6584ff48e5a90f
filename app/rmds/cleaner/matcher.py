"""Target file name matching."""

from rmds.cleaner.config import APPLEDOUBLE_PREFIX, DS_STORE_NAME, CleanConfig


def is_target(name: str, config: CleanConfig) -> bool:
    """Check whether an entry name is a deletion target.

    With ``clean_all`` the predicate accepts ``.DS_Store`` and any name
    starting with ``._``. Otherwise only an exact, case-sensitive match
    on ``config.target_name`` is accepted.

    Args:
        name: Base name of the entry (never a full path).
        config: Active configuration.

    Returns:
        True if the entry should be deleted.
    """
    if config.clean_all:
        return name == DS_STORE_NAME or name.startswith(APPLEDOUBLE_PREFIX)
    return name == config.target_name
