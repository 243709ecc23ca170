# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 15:10:27
# @Author : Kariko Lin

"""Reading INI text into a `ConfigStore`, and writing it back.

The reader is line oriented. Each line is one of (checked in order):

1. comment, `#` or `;` being the first non-blank char;
2. section header, `[name]` at the very beginning;
3. option, `key = value` or `key: value`, the first `=` or `:` splits;
4. continuation, indented deeper than the option above it;
5. blank.

Anything else is skipped with a warning.

Reading merges into the given store, so several files may accumulate.
When it fails halfway, whatever has been read so far STAYS in the store.
"""

import codecs
import logging
import os
from dataclasses import dataclass
from io import StringIO, TextIOBase
from typing import IO, Iterable
from warnings import warn

import chardet

from ..abstract import FileHandler
from .consts import COMMENT_RE, NO_SECTION, OPTION_RE, SECTION_RE, Delimiter
from .errors import MissingSectionHeaderError, StreamError
from .model import ConfigStore


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())


def _unescape(value: str) -> str:
    # the only "interpolation" we do.
    return value.replace('%%', '%')


@dataclass
class _ReadState:
    """Where the reader is, within one `readstream()` call."""
    section: str | None = None
    option: str | None = None
    option_indent: int = 0
    lineno: int = 0


class IniParser(FileHandler[ConfigStore]):
    @staticmethod
    def _feed(ins: ConfigStore, state: _ReadState, line: str) -> None:
        line = line.rstrip('\r\n')
        if COMMENT_RE.match(line):
            return

        if (m := SECTION_RE.match(line)) is not None:
            state.section = m['header']
            state.option = None
            ins.setdefault(state.section)
            return

        if not (text := line.strip()):
            return

        indent = _indent_of(line)
        # an indented `key = val` is still a fresh option.
        if (m := OPTION_RE.match(text)) is not None:
            if state.section is None:
                raise MissingSectionHeaderError(
                    NO_SECTION, state.lineno, line)
            state.option = m['option']
            state.option_indent = indent
            ins.set(state.section, state.option, _unescape(m['value']))
            return

        if (state.option is not None and state.section is not None
                and indent > state.option_indent):
            ins[state.section][state.option] += '\n' + _unescape(text)
            return

        warn(f'第 {state.lineno} 行无法识别，已跳过：\n\t{line}')

    @staticmethod
    def readstream(buf: TextIOBase | IO[str],
                   ins: ConfigStore | None = None) -> ConfigStore:
        """读取解码好的字符串流，合并进`ins`（缺省则新建）。

        Raises:
            MissingSectionHeaderError: an option appears before any header,
                and `ins.allow_no_section_header` is off.
            StreamError: `buf` itself failed.

        Notes: nothing is rolled back on errors above.
        """
        if ins is None:
            ins = ConfigStore()
        state = _ReadState()
        if ins.allow_no_section_header:
            ins.setdefault(NO_SECTION)
            state.section = NO_SECTION

        while True:
            try:
                i = buf.readline()
            except (OSError, UnicodeDecodeError) as e:
                logging.warning(
                    f'Reading stopped at line {state.lineno + 1}: {e}')
                raise StreamError(f'Unable to read {buf!r}: {e}') from e
            if not i:
                break
            state.lineno += 1
            IniParser._feed(ins, state, i)
        return ins

    @staticmethod
    def read_string(text: str, ins: ConfigStore | None = None) -> ConfigStore:
        return IniParser.readstream(StringIO(text), ins)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec['encoding'] = 'utf-8'

        try:
            buf = raw.decode(codec['encoding'])
        # chardet may name a codec python does not know.
        except (UnicodeDecodeError, LookupError) as e:
            msg = f'Unable to decode {filename} as {codec["encoding"]}: {e}'
            logging.warning(msg)
            raise StreamError(msg) from e
        return StringIO(buf)

    def read(self, ins: ConfigStore | None = None) -> ConfigStore:
        """读取`IniParser`实例指定的文件。

        If the file does not decode with the given encoding,
        it is decoded again with whatever `chardet` guesses.
        """
        if ins is None:
            ins = ConfigStore()
        try:
            # when encoding is None, `open()` would fallback to locale one.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                # decode the whole file first, so that a wrong codec
                # fails before anything gets merged.
                buf = StringIO(fp.read())
        except UnicodeDecodeError:
            buf = self._decode_file(self._fn)
        except OSError as e:
            logging.warning(f'Unable to open {self._fn}: {e}')
            raise StreamError(f'Unable to open {self._fn}: {e}') from e
        return self.readstream(buf, ins)

    def read_files(self, *others: str,
                   ins: ConfigStore | None = None) -> ConfigStore:
        """Read the file of this parser, then `others` in sequence,
        all into one store. Later files override earlier ones."""
        ins = self.read(ins)
        for i in others:
            IniParser(i, self._codec).read(ins)
        return ins

    @staticmethod
    def _output_section(
        name: str, pairs: Iterable[tuple[str, str]], delimiter: str
    ) -> str:
        ret = '' if name == NO_SECTION else f'[{name}]\n'
        for k, v in pairs:
            # keep multi-line values readable as continuations.
            v = v.replace('\n', '\n\t')
            ret += f'{k}{delimiter}{v}\n'
        return ret

    @staticmethod
    def writestream(
        buf: TextIOBase | IO[str], ins: ConfigStore, *,
        spaces: bool = False
    ) -> None:
        """写入字符串流。

        The `""` section goes first, without any header line, or it would
        be swallowed by the section above it on the next read.

        Note: `%` is written as is, NOT doubled again.
        Some stores do not survive a write and read again either:
        a continuation piece starting with `#` or `;` reads back as a comment,
        one shaped like `k=v` reads back as an option of its own,
        and a section name holding `]` gets cut at the first `]`.
        """
        delimiter = Delimiter.SPACED if spaces else Delimiter.TIGHT
        order = sorted(ins, key=lambda x: x != NO_SECTION)
        try:
            for i in order:
                buf.write(IniParser._output_section(
                    i, ins.items_of(i), delimiter.value))
                buf.write('\n')
        except OSError as e:
            logging.warning(f'Writing {buf!r} failed: {e}')
            raise StreamError(f'Unable to write {buf!r}: {e}') from e

    def write(
        self, instance: ConfigStore, *,
        spaces: bool = False,
        mode: int = 0o644
    ) -> None:
        """保存到`IniParser`实例指定的文件。

        `mode` only applies when the file gets created.

        Raises:
            LookupError: unknown encoding, the file is left untouched.
            StreamError: the file cannot be opened or written.
        """
        codec = self._codec or 'utf-8'
        # an unknown codec fails here, before the file gets truncated.
        codecs.lookup(codec)
        try:
            fd = os.open(self._fn, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        except OSError as e:
            logging.warning(f'Unable to open {self._fn}: {e}')
            raise StreamError(f'Unable to open {self._fn}: {e}') from e
        try:
            fp = open(fd, 'w', encoding=codec)
        except Exception:
            os.close(fd)
            raise
        with fp:
            self.writestream(fp, instance, spaces=spaces)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
