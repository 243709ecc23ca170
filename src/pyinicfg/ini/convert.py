# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2026/10/19 16:42:50
# @Author : Kariko Lin

"""Export a `ConfigStore` to JSON or YAML documents, and import it back.

Both documents look like `{section: {option: value}}`.
Values are dumped as the raw strings they are;
scalars met on import (say, YAML `port: 80`) are stored as `str`.
"""

import json
import logging
from typing import IO, Any

import yaml

from ..abstract import FileHandler
from .errors import ConversionError, StreamError
from .model import ConfigStore


class _DocumentConverter(FileHandler[ConfigStore]):
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename, encoding)

    def _open(self, mode: str) -> IO[str]:
        try:
            return open(self._fn, mode, encoding=self._codec)
        except OSError as e:
            logging.warning(f'Unable to open {self._fn}: {e}')
            raise StreamError(f'Unable to open {self._fn}: {e}') from e

    @staticmethod
    def _to_document(instance: ConfigStore) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in instance.items()}

    @staticmethod
    def _from_document(src: Any, ins: ConfigStore) -> ConfigStore:
        if not isinstance(src, dict):
            raise ConversionError(
                f'Expect a mapping of sections, got {type(src).__name__}.')
        for sect, pairs in src.items():
            if pairs is None:  # `[empty]` dumped by yaml as `empty: {}`
                pairs = {}
            if not isinstance(pairs, dict):
                raise ConversionError(
                    f'Section "{sect}" is not a mapping of options.')
            target = ins.setdefault(str(sect))
            for k, v in pairs.items():
                if isinstance(v, (dict, list)):
                    raise ConversionError(
                        f'Option "{k}" in section "{sect}" is not a scalar.')
                target[str(k)] = '' if v is None else str(v)
        return ins


class IniJsonConverter(_DocumentConverter):
    def read(self, ins: ConfigStore | None = None) -> ConfigStore:
        with self._open('r') as fp:
            try:
                src = json.load(fp)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise ConversionError(
                    f'{self._fn} is not a valid JSON document: {e}') from e
        if ins is None:
            ins = ConfigStore()
        return self._from_document(src, ins)

    def write(self, instance: ConfigStore, indent: int = 2) -> None:
        with self._open('w') as fp:
            json.dump(self._to_document(instance), fp,
                      ensure_ascii=False, indent=indent)


class IniYamlConverter(_DocumentConverter):
    def read(self, ins: ConfigStore | None = None) -> ConfigStore:
        with self._open('r') as fp:
            try:
                src = yaml.safe_load(fp)
            except (yaml.YAMLError, UnicodeDecodeError) as e:
                raise ConversionError(
                    f'{self._fn} is not a valid YAML document: {e}') from e
        if ins is None:
            ins = ConfigStore()
        return self._from_document(src, ins)

    def write(self, instance: ConfigStore, indent: int = 2) -> None:
        with self._open('w') as fp:
            yaml.safe_dump(self._to_document(instance), fp,
                           allow_unicode=True, sort_keys=False, indent=indent)
