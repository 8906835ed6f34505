import json

import pytest

from apps.notice.protocol import (
    AddNotice,
    CommandRejected,
    DeleteNotice,
    InitialState,
    NoticeAdded,
    NoticeDeleted,
    encode_fact,
    parse_command,
)
from utils.exceptions import MalformedMessage


def test_parse_add_notice():
    command = parse_command(json.dumps({"type": "ADD_NOTICE", "notice": {"title": "t"}, "requestId": "r1"}))
    assert command == AddNotice(notice={"title": "t"}, request_id="r1")


def test_parse_delete_notice():
    command = parse_command(b'{"type": "DELETE_NOTICE", "id": 3}')
    assert command == DeleteNotice(id=3)


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[1, 2, 3]",
        '"ADD_NOTICE"',
        '{"notice": {}}',
        '{"type": "EDIT_NOTICE", "id": 1}',
        '{"type": ["ADD_NOTICE"]}',
        '{"type": "ADD_NOTICE"}',
        '{"type": "ADD_NOTICE", "notice": "title"}',
        '{"type": "DELETE_NOTICE"}',
        '{"type": "DELETE_NOTICE", "id": "1"}',
        '{"type": "DELETE_NOTICE", "id": true}',
        '{"type": "DELETE_NOTICE", "id": 1.5}',
    ],
)
def test_parse_rejects_malformed(raw):
    with pytest.raises(MalformedMessage):
        parse_command(raw)


def test_fact_messages():
    notice = {"id": 1, "title": "공지"}
    assert InitialState([notice]).to_message() == {"type": "INITIAL_STATE", "notices": [notice]}
    assert NoticeAdded(notice).to_message() == {"type": "NOTICE_ADDED", "notice": notice}
    assert NoticeDeleted(1).to_message() == {"type": "NOTICE_DELETED", "id": 1}
    assert CommandRejected("r1", "validation", {"title": ["blank"]}).to_message() == {
        "type": "COMMAND_REJECTED",
        "requestId": "r1",
        "reason": "validation",
        "errors": {"title": ["blank"]},
    }


def test_encode_fact_keeps_unicode():
    assert encode_fact(NoticeDeleted(7)) == '{"type": "NOTICE_DELETED", "id": 7}'
    assert "공지" in encode_fact(NoticeAdded({"id": 1, "title": "공지"}))
