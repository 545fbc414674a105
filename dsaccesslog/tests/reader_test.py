# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---
#
import gzip
import io
import json
import logging
import pytest

from dsaccesslog import open_reader
from dsaccesslog._constants import ACCESS_LOG_TYPE, MessageType, ReaderState
from dsaccesslog.exceptions import (
    FieldFormatError,
    InvalidEnumValue,
    MalformedRecord,
    MissingRequiredField,
    ReaderClosed,
    SourceUnavailable,
)
from dsaccesslog.messages import (
    BindRequestMessage,
    ConnectMessage,
    DisconnectMessage,
)


class BrokenStream(io.BytesIO):
    def readline(self, *args):
        raise OSError("device not ready")


def test_read_two_connects(make_record, write_log, defaults):
    path = write_log([
        make_record('connect'),
        make_record('connect', fromAddress='2.3.4.5', fromPort=1234,
                    protocol='LDAP'),
    ])
    reader = open_reader(path)
    assert reader.state is ReaderState.OPEN

    assert reader.read_message() == ConnectMessage(
        timestamp=defaults.timestamp_date, message_type=MessageType.CONNECT,
        log_type=ACCESS_LOG_TYPE)
    assert reader.read_message() == ConnectMessage(
        timestamp=defaults.timestamp_date, message_type=MessageType.CONNECT,
        log_type=ACCESS_LOG_TYPE, source_address='2.3.4.5', source_port=1234,
        protocol_name='LDAP')

    assert reader.read_message() is None
    assert reader.state is ReaderState.EXHAUSTED
    assert reader.read_message() is None
    reader.close()


def test_exhaustion(make_record, write_log):
    records = [make_record('request', 'bind', operationID=i, messageID=i + 1)
               for i in range(25)]
    reader = open_reader(write_log(records))
    messages = []
    while True:
        message = reader.read_message()
        if message is None:
            break
        messages.append(message)
    assert [m.operation_id for m in messages] == list(range(25))
    assert all(isinstance(m, BindRequestMessage) for m in messages)
    for i in range(3):
        assert reader.read_message() is None
    assert reader.lines_read == 25
    reader.close()


def test_resync_after_bad_records(make_record, write_log):
    path = write_log([
        make_record('connect', fromAddress='1.2.3.4'),
        '',
        '{"timestamp": "2026-03-04T05:06:07Z", "messageType": ',
        '[1, 2, 3]',
        make_record('not-a-message-type'),
        make_record('result', 'search', resultCode='OK'),
        make_record('disconnect', disconnectReason='Client Unbind'),
    ])
    reader = open_reader(path)
    assert isinstance(reader.read_message(), ConnectMessage)

    with pytest.raises(MalformedRecord) as e:
        reader.read_message()
    assert e.value.line_number == 3
    assert str(e.value).startswith('line 3: ')
    assert reader.state is ReaderState.FAILED

    with pytest.raises(MalformedRecord) as e:
        reader.read_message()
    assert e.value.line_number == 4

    with pytest.raises(InvalidEnumValue) as e:
        reader.read_message()
    assert e.value.line_number == 5

    with pytest.raises(FieldFormatError) as e:
        reader.read_message()
    assert e.value.line_number == 6
    assert e.value.field_name == 'resultCode'

    message = reader.read_message()
    assert isinstance(message, DisconnectMessage)
    assert message.disconnect_reason == 'Client Unbind'
    assert reader.state is ReaderState.OPEN

    assert reader.read_message() is None
    assert reader.state is ReaderState.EXHAUSTED
    reader.close()


def test_missing_required_field_reports_line(make_record, write_log):
    record = make_record('connect')
    del record['timestamp']
    reader = open_reader(write_log([make_record('connect'), record]))
    reader.read_message()
    with pytest.raises(MissingRequiredField) as e:
        reader.read_message()
    assert e.value.line_number == 2
    assert str(e.value) == "line 2: required field 'timestamp' is missing"
    reader.close()


def test_invalid_utf8(tmp_path, make_record):
    path = tmp_path / 'access.json'
    with open(path, 'wb') as f:
        f.write(b'{"messageType": "\xff\xfe"}\n')
        f.write(json.dumps(make_record('connect')).encode('utf-8') + b'\n')
    with open_reader(path) as reader:
        with pytest.raises(MalformedRecord):
            reader.read_message()
        assert isinstance(reader.read_message(), ConnectMessage)


def test_invalid_utf8_in_text_stream(tmp_path, make_record):
    path = tmp_path / 'access.json'
    with open(path, 'wb') as f:
        f.write(b'{"messageType": "\xff"}\n')
        f.write(json.dumps(make_record('connect')).encode('utf-8') + b'\n')
    stream = open(path, 'r', encoding='utf-8')
    with open_reader(stream) as reader:
        with pytest.raises(SourceUnavailable):
            reader.read_message()
        assert reader.state is ReaderState.FAILED
        with pytest.raises(SourceUnavailable):
            reader.read_message()
    assert stream.closed


def test_deeply_nested_line(make_record):
    depth = 100000
    record = make_record('connect')
    record['x'] = None
    deep = json.dumps(record).replace('null', '[' * depth + ']' * depth)
    lines = deep + '\n' + json.dumps(make_record('connect')) + '\n'
    with open_reader(io.StringIO(lines)) as reader:
        with pytest.raises(MalformedRecord) as e:
            reader.read_message()
        assert e.value.line_number == 1
        assert reader.state is ReaderState.FAILED
        assert isinstance(reader.read_message(), ConnectMessage)
        assert reader.state is ReaderState.OPEN


def test_gzip_source(tmp_path, make_record):
    path = tmp_path / 'access.json.gz'
    with gzip.open(path, 'wt') as f:
        f.write(json.dumps(make_record('connect')) + '\n')
        f.write(json.dumps(make_record('disconnect')) + '\n')
    with open_reader(str(path)) as reader:
        assert [m.message_type for m in reader] == [MessageType.CONNECT,
                                                    MessageType.DISCONNECT]


def test_truncated_gzip_source(tmp_path, make_record):
    path = tmp_path / 'access.json.gz'
    with gzip.open(path, 'wt') as f:
        for i in range(50):
            f.write(json.dumps(make_record('connect', connectionID=i)) + '\n')
    data = path.read_bytes()
    path.write_bytes(data[:-4])

    reader = open_reader(path)
    with pytest.raises(SourceUnavailable):
        for i in range(51):
            reader.read_message()
    assert reader.state is ReaderState.FAILED
    reader.close()


def test_stream_sources(make_record):
    lines = json.dumps(make_record('connect')) + '\n' + \
        json.dumps(make_record('request', 'unbind')) + '\n'

    with open_reader(io.StringIO(lines)) as reader:
        assert len(list(reader)) == 2

    with open_reader(io.BytesIO(lines.encode('utf-8'))) as reader:
        assert isinstance(reader.read_message(), ConnectMessage)
        assert reader.read_message().operation_type.value == 'unbind'
        assert reader.read_message() is None


def test_read_failure_is_permanent():
    reader = open_reader(BrokenStream())
    with pytest.raises(SourceUnavailable):
        reader.read_message()
    assert reader.state is ReaderState.FAILED
    with pytest.raises(SourceUnavailable):
        reader.read_message()
    reader.close()
    assert reader.state is ReaderState.CLOSED


def test_missing_file(tmp_path):
    with pytest.raises(SourceUnavailable):
        open_reader(tmp_path / 'missing.json')


def test_close(make_record, write_log):
    path = write_log([make_record('connect'), make_record('connect')])
    with open_reader(path) as reader:
        assert reader.read_message() is not None
    assert reader.state is ReaderState.CLOSED
    with pytest.raises(ReaderClosed):
        reader.read_message()
    # Closing again is harmless
    reader.close()
    assert reader.state is ReaderState.CLOSED

    stream = io.StringIO(json.dumps(make_record('connect')) + '\n')
    reader = open_reader(stream)
    reader.close()
    assert stream.closed


def test_iteration_stops_at_end(make_record, write_log):
    path = write_log([make_record('connect', connectionID=i)
                      for i in range(5)])
    with open_reader(path) as reader:
        assert [m.connection_id for m in reader] == [0, 1, 2, 3, 4]
        assert list(reader) == []


def test_verbose_logging(make_record, write_log, log_capture):
    path = write_log([make_record('connect')])
    with open_reader(path, verbose=True) as reader:
        reader.read_message()
        reader.read_message()
    assert log_capture.contains('line 1: ConnectMessage')
    assert log_capture.contains('End of access log')


def test_quiet_by_default(make_record, write_log, log_capture):
    path = write_log([make_record('connect')])
    with open_reader(path) as reader:
        reader.read_message()
    assert not log_capture.contains('ConnectMessage')


def test_quiet_reader_keeps_verbose_reader_logging(make_record, write_log,
                                                   log_capture):
    logging.getLogger('AccessLogReader').setLevel(logging.INFO)
    verbose = open_reader(write_log([make_record('connect')], 'verbose.json'),
                          verbose=True)
    quiet = open_reader(write_log([make_record('disconnect')], 'quiet.json'))
    assert logging.getLogger('AccessLogReader').isEnabledFor(logging.DEBUG)

    verbose.read_message()
    quiet.read_message()
    assert log_capture.contains('line 1: ConnectMessage')
    assert not log_capture.contains('DisconnectMessage')
    verbose.close()
    quiet.close()
