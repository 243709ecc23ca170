# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/19 14:05:37
# @Author : Kariko Lin

from enum import Enum
from re import compile as regex

# python3 configparser alike.
COMMENT_RE = regex(r'^\s*[#;]')
SECTION_RE = regex(r'^\[(?P<header>[^]]+)\]')
# the first `=` or `:` wins, so keys never contain either.
OPTION_RE = regex(r'^(?P<option>[^=:]+?)\s*(?P<vi>[=:])\s*(?P<value>.*)$')

BOOLEAN_STATES = {
    '1': True, 'yes': True, 'true': True, 'on': True,
    '0': False, 'no': False, 'false': False, 'off': False,
}

# section name of pairs above any `[header]`.
NO_SECTION = ''

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class Delimiter(str, Enum):
    TIGHT = '='
    SPACED = ' = '
