"""Split command arguments into prefixed values."""

import re
from collections import defaultdict
from dataclasses import dataclass

from hubhealth.models.exceptions import ParseError

MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "


@dataclass(frozen=True)
class Prefix:
    """A flag such as ``-IC`` that marks the start of an argument value."""

    flag: str

    def __str__(self) -> str:
        return self.flag


PREFIX_NRIC = Prefix("-IC")
PREFIX_NAME = Prefix("-N")
PREFIX_PHONE = Prefix("-P")
PREFIX_DATE_OF_BIRTH = Prefix("-DOB")
PREFIX_TAG = Prefix("-T")
PREFIX_DATE_TIME = Prefix("-D")
PREFIX_INDEX = Prefix("-I")

PREAMBLE = Prefix("")


class ArgumentMultimap:
    """Values collected for each prefix, in the order they appeared."""

    def __init__(self):
        self._values: dict[Prefix, list[str]] = defaultdict(list)

    def put(self, prefix: Prefix, value: str) -> None:
        self._values[prefix].append(value)

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value given for ``prefix``, if any."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def has(self, prefix: Prefix) -> bool:
        return prefix in self._values

    @property
    def preamble(self) -> str:
        return self.get_value(PREAMBLE) or ""

    def verify_no_duplicate_prefixes(self, *prefixes: Prefix) -> None:
        """Raise if any of ``prefixes`` was given more than once.

        Raises:
            ParseError: Listing every duplicated prefix
        """
        duplicated = [prefix for prefix in prefixes if len(self._values.get(prefix, [])) > 1]
        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS + " ".join(str(prefix) for prefix in duplicated))


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Split ``args`` on the given prefixes.

    A prefix only counts when it is preceded by whitespace (or starts the
    string) and followed by whitespace or the end of the string, so
    ``-IC`` is not mistaken for ``-I``. Text before the first prefix is the
    preamble.
    """
    multimap = ArgumentMultimap()
    if not prefixes:
        multimap.put(PREAMBLE, args.strip())
        return multimap

    # Longest flags first so "-DOB" wins over "-D"
    flags = sorted((re.escape(prefix.flag) for prefix in prefixes), key=len, reverse=True)
    pattern = re.compile(r"(?:^|(?<=\s))(" + "|".join(flags) + r")(?=\s|$)")
    by_flag = {prefix.flag: prefix for prefix in prefixes}

    matches = list(pattern.finditer(args))
    end_of_preamble = matches[0].start() if matches else len(args)
    multimap.put(PREAMBLE, args[:end_of_preamble].strip())

    for current, following in zip(matches, [*matches[1:], None], strict=True):
        value_end = following.start() if following else len(args)
        multimap.put(by_flag[current.group(1)], args[current.end() : value_end].strip())

    return multimap
