# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Read decoded messages from a JSON access log, one line at a time."""

import gzip
import json
import logging
import os
import zlib
from dsaccesslog._constants import ReaderState
from dsaccesslog.exceptions import (
    DecodeError,
    MalformedRecord,
    ReaderClosed,
    SourceUnavailable,
)
from dsaccesslog.registry import decode_record


class JSONRecordSource(object):
    """Yields the JSON object on each non-blank line of a stream.

    :param stream: A binary or text stream
    :param name: Name of the stream for messages
    :type name: str
    """

    def __init__(self, stream, name=None):
        self._stream = stream
        self.name = name
        self.line_number = 0

    @classmethod
    def open(cls, source):
        """Open a log file, or wrap an already open stream.

        Files ending in .gz are read through gzip, as rotated access logs
        are often compressed.

        :param source: A path, or an object with a readline method
        :returns: JSONRecordSource
        :raises: SourceUnavailable - if the file can not be opened
        """
        if hasattr(source, 'readline'):
            return cls(source, getattr(source, 'name', None))
        path = os.fspath(source)
        try:
            if path.endswith('.gz'):
                stream = gzip.open(path, 'rb')
            else:
                stream = open(path, 'rb')
        except OSError as e:
            raise SourceUnavailable("Unable to open access log %s: %s" %
                                    (path, e)) from e
        return cls(stream, path)

    def read_record(self):
        """Return the next record, or None at the end of the stream.

        :returns: dict or None
        :raises: SourceUnavailable - if the stream can not be read
        :raises: MalformedRecord - if a line is not a JSON object
        """
        while True:
            try:
                line = self._stream.readline()
            except (OSError, EOFError, zlib.error) as e:
                raise SourceUnavailable("Unable to read access log %s: %s" %
                                        (self.name, e)) from e
            except UnicodeDecodeError as e:
                # A text stream can not skip past the bad bytes
                raise SourceUnavailable("Unable to decode access log %s: %s" %
                                        (self.name, e)) from e
            if not line:
                return None
            self.line_number += 1
            if isinstance(line, bytes):
                try:
                    line = line.decode('utf-8')
                except UnicodeDecodeError as e:
                    raise MalformedRecord("line is not valid UTF-8: %s" % e,
                                          self.line_number) from e
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.decoder.JSONDecodeError as e:
                raise MalformedRecord("line is not valid JSON: %s" % e,
                                      self.line_number) from e
            except RecursionError as e:
                raise MalformedRecord("line is nested too deeply",
                                      self.line_number) from e
            if not isinstance(record, dict):
                raise MalformedRecord("line is not a JSON object",
                                      self.line_number)
            return record

    def close(self):
        self._stream.close()


class AccessLogReader(object):
    """Reads messages from a JSON formatted access log.

    The reader starts OPEN. It becomes EXHAUSTED at the end of the log, after
    which every read returns None. A record that can not be decoded makes the
    read raise and leaves the reader FAILED; the next read carries on with the
    following line. A failure to read the log itself is permanent. The reader
    is CLOSED by close(), or on leaving a with block, and may not be read
    afterwards.

    All readers log through the one AccessLogReader logger. A verbose reader
    raises that logger to DEBUG but never lowers it, and only verbose readers
    log each decoded record, so a quiet reader does not silence a verbose one.

    :param source: A path to a log file (optionally gzip compressed), or an
                   open stream that the reader takes ownership of
    :param verbose: Log every decoded record at debug level
    :type verbose: bool
    :raises: SourceUnavailable - if the source can not be opened
    """

    def __init__(self, source, verbose=False):
        self._log = logging.getLogger(type(self).__name__)
        self._verbose = verbose
        if verbose:
            self._log.setLevel(logging.DEBUG)
        self._source = JSONRecordSource.open(source)
        self._state = ReaderState.OPEN
        self._read_error = None

    @property
    def state(self):
        return self._state

    @property
    def lines_read(self):
        return self._source.line_number

    def read_message(self):
        """Read and decode the next message.

        :returns: A LogMessage, or None at the end of the log
        :raises: ReaderClosed - if the reader was closed
        :raises: SourceUnavailable - if the log can not be read
        :raises: DecodeError - if the next record is not a valid message
        """
        if self._state is ReaderState.CLOSED:
            raise ReaderClosed("The access log reader has been closed")
        if self._state is ReaderState.EXHAUSTED:
            return None
        if self._read_error is not None:
            raise SourceUnavailable(str(self._read_error)) \
                from self._read_error

        try:
            record = self._source.read_record()
            if record is None:
                self._log.debug("End of access log %s after %d lines",
                                self._source.name, self._source.line_number)
                self._state = ReaderState.EXHAUSTED
                return None
            message = decode_record(record)
        except SourceUnavailable as e:
            self._log.debug(str(e))
            self._state = ReaderState.FAILED
            self._read_error = e
            raise
        except DecodeError as e:
            if e.line_number is None:
                e.line_number = self._source.line_number
            self._log.debug("Unable to decode record: %s", e)
            self._state = ReaderState.FAILED
            raise

        if self._verbose:
            self._log.debug("line %d: %s", self._source.line_number,
                            type(message).__name__)
        self._state = ReaderState.OPEN
        return message

    def close(self):
        """Release the log. Closing more than once is allowed."""
        if self._state is ReaderState.CLOSED:
            return
        self._state = ReaderState.CLOSED
        self._source.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __iter__(self):
        return self

    def __next__(self):
        message = self.read_message()
        if message is None:
            raise StopIteration
        return message


def open_reader(source, verbose=False):
    """Open a JSON access log for reading.

    :param source: A path to a log file, or an open stream
    :param verbose: Log every decoded record at debug level
    :type verbose: bool
    :returns: AccessLogReader
    :raises: SourceUnavailable - if the source can not be opened
    """
    return AccessLogReader(source, verbose=verbose)
