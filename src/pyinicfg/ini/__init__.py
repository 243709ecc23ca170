# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 14:01:30
# @Author : Kariko Lin

from .model import ConfigSection, ConfigStore
from .parser import IniParser
from .convert import IniJsonConverter, IniYamlConverter
from .errors import (
    ConfigError,
    ConfigLookupError,
    NoSectionError,
    NoOptionError,
    StructuralParseError,
    MissingSectionHeaderError,
    ConflictError,
    DuplicateSectionError,
    ConversionError,
    NumberFormatError,
    NotBooleanError,
    StreamError
)
