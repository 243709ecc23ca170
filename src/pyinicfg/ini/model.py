# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 14:26:03
# @Author : Kariko Lin

"""
Basically INI structure: a group of named sections, each of which
keeps ordered `str: str` option pairs.

As for reading and writing text, just see `ini.parser`.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from math import isinf
from re import compile as regex

from .consts import BOOLEAN_STATES, INT64_MAX, INT64_MIN, NO_SECTION
from .errors import (
    DuplicateSectionError,
    NoOptionError,
    NoSectionError,
    NotBooleanError,
    NumberFormatError
)

_INT_RE = regex(r'[+-]?[0-9]+')


class ConfigSection(MutableMapping[str, str]):
    """INI 小节字典。

    It is a live view: changes made through it land in the owning
    `ConfigStore` directly.
    """
    def __init__(self, section_name: str, this_dict: dict[str, str]) -> None:
        self._name = section_name
        # in case shared ptr to item of ConfigStore.__raw
        self._data = this_dict

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        if key not in self._data:
            raise NoOptionError(self._name, key)
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        if key not in self._data:
            raise NoOptionError(self._name, key)
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class ConfigStore(MutableMapping[str, ConfigSection]):
    """INI 文件表示。支持以下形式的小节和键值对：

        ```ini
        key = val  ; 仅当 allow_no_section_header 时，归入 "" 小节。

        [section]
        key233 = val666
        multi: first line
            second line
        ```

    Values are always kept as raw strings. `getint()` and the like
    convert them on every call, without caching.

    Not thread safe: load once, mutate, write once.
    """
    def __init__(self, *, allow_no_section_header: bool = False) -> None:
        self.__raw: dict[str, dict[str, str]] = {}
        self.__no_header = False
        self.allow_no_section_header = allow_no_section_header

    @property
    def allow_no_section_header(self) -> bool:
        """Whether pairs above the first `[section]` are accepted.

        They go into the section named `""`, which exists as long as
        this flag is on (unless removed explicitly).
        """
        return self.__no_header

    @allow_no_section_header.setter
    def allow_no_section_header(self, value: bool) -> None:
        self.__no_header = value
        if value:
            self.__raw.setdefault(NO_SECTION, {})

    # mapping protocol

    def __getitem__(self, key: str) -> ConfigSection:
        if key not in self.__raw:
            raise NoSectionError(key)
        return ConfigSection(key, self.__raw[key])

    def __setitem__(
        self,
        key: str,
        value: ConfigSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw[key] = dict(value.items())

    def __delitem__(self, key: str) -> None:
        self.remove_section(key)

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return 'ConfigStore { .sections = %d }' % len(self.__raw)

    def clear(self) -> None:
        self.__raw.clear()
        if self.__no_header:
            self.__raw[NO_SECTION] = {}

    def setdefault(  # type: ignore[override]
        self, key: str, default: Mapping[str, str] | None = None
    ) -> ConfigSection:
        """Get section `key`, creating it (from `default`) if absent."""
        if key not in self.__raw:
            self.__raw[key] = {} if default is None else dict(default)
        return self[key]

    # queries

    def sections(self) -> set[str]:
        return set(self.__raw)

    def options(self, section: str) -> set[str]:
        return set(self[section])

    def items_of(self, section: str) -> list[tuple[str, str]]:
        """Ordered `(option, value)` pairs of `section`."""
        return list(self[section].items())

    def has_section(self, section: str) -> bool:
        return section in self.__raw

    def has_option(self, section: str, option: str) -> bool:
        return option in self.__raw.get(section, {})

    # typed getters

    def get(self, section: str, option: str) -> str:  # type: ignore[override]
        """Raw string of `option` in `section`.

        Raises:
            NoSectionError: `section` not found.
            NoOptionError: `section` found, but `option` not.
        """
        return self[section][option]

    def getint(self, section: str, option: str) -> int:
        """Base-10 signed 64-bit integer, like `-42` or `+7`.

        Surrounding spaces, underscores and other bases are all rejected.
        """
        val = self.get(section, option)
        if _INT_RE.fullmatch(val) is None:
            raise NumberFormatError(section, option, val)
        ret = int(val)
        if not INT64_MIN <= ret <= INT64_MAX:
            raise NumberFormatError(section, option, val)
        return ret

    def getfloat(self, section: str, option: str) -> float:
        val = self.get(section, option)
        # `float()` is kinder than we want on these.
        if val != val.strip() or '_' in val:
            raise NumberFormatError(section, option, val)
        try:
            ret = float(val)
        except ValueError:
            raise NumberFormatError(section, option, val) from None
        # out of range, like `1e400`.
        if isinf(ret) and val.lstrip('+-').lower() not in ('inf', 'infinity'):
            raise NumberFormatError(section, option, val)
        return ret

    def getbool(self, section: str, option: str) -> bool:
        val = self.get(section, option)
        if (ret := BOOLEAN_STATES.get(val.lower())) is None:
            raise NotBooleanError(section, option, val)
        return ret

    # mutators

    def add_section(self, section: str) -> None:
        if section in self.__raw:
            raise DuplicateSectionError(section)
        self.__raw[section] = {}

    def set(self, section: str, option: str, value: str) -> None:
        """Store `value` as is. Sections are never created implicitly."""
        self[section][option] = value

    def remove_option(self, section: str, option: str) -> None:
        del self[section][option]

    def remove_section(self, section: str) -> None:
        if section not in self.__raw:
            raise NoSectionError(section)
        del self.__raw[section]
