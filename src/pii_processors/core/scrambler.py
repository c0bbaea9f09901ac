"""
Format-preserving scrambler

Replaces ASCII letters and digits in place with random characters of the
same class. Everything else (separators, whitespace, non-ASCII) keeps its
position, so the scrambled token has the shape of the original.

Example:
    "ABC-1a2bC" -> "PUI-7x9vY"
"""

from pii_processors.core.random_source import RandomSource


def scramble_string(value: str, rng: RandomSource) -> str:
    """Scramble the alphanumerics of a string.

    Args:
        value: The original value.
        rng: Random source for the replacement characters.

    Returns:
        A string of the same length with the same per-position character class.
    """
    out = []
    for c in value:
        if "a" <= c <= "z":
            out.append(rng.lowercase())
        elif "A" <= c <= "Z":
            out.append(rng.uppercase())
        elif "0" <= c <= "9":
            out.append(rng.digit())
        else:
            out.append(c)
    return "".join(out)
