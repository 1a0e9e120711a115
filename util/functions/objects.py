###########EXTERNAL IMPORTS############

from typing import Optional
import os

#######################################

#############LOCAL IMPORTS#############

#######################################


def require_env_variable(key: str) -> str:
    """
    Returns the value of the environment variable for the given key.

    Raises:
        KeyError: If the key is not found
    """

    value = os.getenv(key)
    if value is None:
        raise KeyError(f"Key {key} was not found in the environment")

    return value


def check_bool_str(string: Optional[str]) -> bool:
    """
    Convert string to boolean, case-insensitive check for "TRUE".

    Args:
        string: String to convert, or None.

    Returns:
        bool: True if string equals "TRUE" (case-insensitive), False otherwise.
    """

    if string is not None:
        return string.strip().upper() == "TRUE"
    return False
