"""
Parsing utilities for command line arguments.

Kept apart from the argument parser for testability.
"""
import codecs


def parse_threshold(threshold_string: str) -> int:
    """
    Parse threshold argument.

    Any integer is accepted, including zero and negative values, which
    simply let every folder with at least one file through.

    Args:
        threshold_string: Threshold value as string

    Returns:
        Integer threshold

    Raises:
        ValueError: If the value is not an integer

    Examples:
        >>> parse_threshold("500")
        500
        >>> parse_threshold(" -1 ")
        -1
    """
    try:
        return int(threshold_string.strip())
    except ValueError:
        raise ValueError(f"Invalid threshold: '{threshold_string}' is not a number")


def parse_encoding(encoding_string: str) -> str:
    """
    Parse and normalize an encoding name.

    Args:
        encoding_string: Codec name such as "shift_jis", "cp932" or "gbk"

    Returns:
        The canonical Python codec name

    Raises:
        ValueError: If Python does not know the codec
    """
    name = encoding_string.strip()
    try:
        return codecs.lookup(name).name
    except LookupError:
        raise ValueError(f"Unknown encoding: '{encoding_string}'")
