# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/19 14:11:48
# @Author : Kariko Lin

"""Everything `ConfigStore` and `IniParser` may raise.

Each error keeps the names (and the raw value, if any) it complains about
as attributes, so callers are able to branch on them instead of
comparing messages.
"""


class ConfigError(Exception):
    """Base of all errors in this package."""
    def __init__(self, msg: str = '') -> None:
        super().__init__(msg)
        self.message = msg

    def __str__(self) -> str:
        return self.message


# KeyError, so that `Mapping` mixins (`get`, `in`, ...) keep working.
class ConfigLookupError(ConfigError, KeyError):
    """Requested section or option is absent."""
    pass


class NoSectionError(ConfigLookupError):
    def __init__(self, section: str) -> None:
        super().__init__(f'No section: {section}')
        self.section = section


class NoOptionError(ConfigLookupError):
    def __init__(self, section: str, option: str) -> None:
        super().__init__(f'No option {option} in section {section}')
        self.section = section
        self.option = option


class StructuralParseError(ConfigError):
    """Input lines make no sense at the place they appear."""
    lineno: int
    line: str


class MissingSectionHeaderError(NoSectionError, StructuralParseError):
    """An option line came before any `[section]`,
    while headerless input is not allowed."""
    def __init__(self, section: str, lineno: int, line: str) -> None:
        super().__init__(section)
        self.lineno = lineno
        self.line = line
        self.message += f' (line {lineno}: {line!r})'


class ConflictError(ConfigError):
    pass


class DuplicateSectionError(ConflictError):
    def __init__(self, section: str) -> None:
        super().__init__(f'Section "{section}" already exists')
        self.section = section


class ConversionError(ConfigError, ValueError):
    """A typed getter (or a converter) met a value it cannot handle."""
    pass


class NumberFormatError(ConversionError):
    def __init__(self, section: str, option: str, value: str) -> None:
        super().__init__(f'Invalid number: {value}')
        self.section = section
        self.option = option
        self.value = value


class NotBooleanError(ConversionError):
    def __init__(self, section: str, option: str, value: str) -> None:
        super().__init__(f'No boolean: {value}')
        self.section = section
        self.option = option
        self.value = value


class StreamError(ConfigError):
    """Reading or writing the underlying stream failed.

    The original `OSError` (or `UnicodeDecodeError`) is kept as `__cause__`.
    """
    pass
