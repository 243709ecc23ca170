# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 14:00:12
# @Author : Kariko Lin

import logging

from .ini import (
    ConfigSection, ConfigStore,
    IniParser, IniJsonConverter, IniYamlConverter,
    ConfigError, ConfigLookupError, NoSectionError, NoOptionError,
    StructuralParseError, MissingSectionHeaderError,
    ConflictError, DuplicateSectionError,
    ConversionError, NumberFormatError, NotBooleanError,
    StreamError
)

__all__ = [
    'ConfigSection', 'ConfigStore',
    'IniParser', 'IniJsonConverter', 'IniYamlConverter',
    'ConfigError', 'ConfigLookupError', 'NoSectionError', 'NoOptionError',
    'StructuralParseError', 'MissingSectionHeaderError',
    'ConflictError', 'DuplicateSectionError',
    'ConversionError', 'NumberFormatError', 'NotBooleanError',
    'StreamError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
