"""
공지 게시판 웹소켓 메시지 정의.

클라이언트 -> 서버 명령(command)과 서버 -> 클라이언트 사실(fact)을
각각 고정된 타입 집합으로 표현합니다. 알 수 없는 type 은 MalformedMessage 로 거절합니다.
"""

import json
import typing
from dataclasses import dataclass, field

from utils.exceptions import MalformedMessage

# 명령 타입
ADD_NOTICE = "ADD_NOTICE"
DELETE_NOTICE = "DELETE_NOTICE"

# 사실 타입
INITIAL_STATE = "INITIAL_STATE"
NOTICE_ADDED = "NOTICE_ADDED"
NOTICE_DELETED = "NOTICE_DELETED"
COMMAND_REJECTED = "COMMAND_REJECTED"

REJECT_VALIDATION = "validation"
REJECT_STORE_UNAVAILABLE = "store_unavailable"


@dataclass(frozen=True)
class AddNotice:
    notice: dict
    request_id: typing.Any = None


@dataclass(frozen=True)
class DeleteNotice:
    id: int
    request_id: typing.Any = None


Command = typing.Union[AddNotice, DeleteNotice]


@dataclass(frozen=True)
class InitialState:
    notices: list

    def to_message(self):
        return {"type": INITIAL_STATE, "notices": list(self.notices)}


@dataclass(frozen=True)
class NoticeAdded:
    notice: dict

    def to_message(self):
        return {"type": NOTICE_ADDED, "notice": self.notice}


@dataclass(frozen=True)
class NoticeDeleted:
    id: int

    def to_message(self):
        return {"type": NOTICE_DELETED, "id": self.id}


@dataclass(frozen=True)
class CommandRejected:
    request_id: typing.Any
    reason: str
    errors: dict = field(default_factory=dict)

    def to_message(self):
        return {
            "type": COMMAND_REJECTED,
            "requestId": self.request_id,
            "reason": self.reason,
            "errors": self.errors,
        }


Fact = typing.Union[InitialState, NoticeAdded, NoticeDeleted, CommandRejected]


def _parse_add(payload, request_id):
    notice = payload.get("notice")
    if not isinstance(notice, dict):
        raise MalformedMessage("ADD_NOTICE requires a 'notice' object")
    return AddNotice(notice=notice, request_id=request_id)


def _parse_delete(payload, request_id):
    notice_id = payload.get("id")
    # bool 은 int 의 하위 타입이라 따로 걸러냅니다.
    if isinstance(notice_id, bool) or not isinstance(notice_id, int):
        raise MalformedMessage("DELETE_NOTICE requires an integer 'id'")
    return DeleteNotice(id=notice_id, request_id=request_id)


_COMMAND_PARSERS = {
    ADD_NOTICE: _parse_add,
    DELETE_NOTICE: _parse_delete,
}


def parse_command(text_data) -> Command:
    """웹소켓 텍스트 프레임을 명령 객체로 변환합니다."""
    try:
        payload = json.loads(text_data)
    except (TypeError, ValueError) as e:
        raise MalformedMessage(f"invalid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise MalformedMessage("message must be a JSON object")

    command_type = payload.get("type")
    parser = _COMMAND_PARSERS.get(command_type) if isinstance(command_type, str) else None
    if parser is None:
        raise MalformedMessage(f"unknown command type: {command_type!r}")
    return parser(payload, payload.get("requestId"))


def encode_fact(fact: Fact) -> str:
    return json.dumps(fact.to_message(), ensure_ascii=False)
