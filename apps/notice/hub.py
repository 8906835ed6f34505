"""
실시간 공지 동기화 허브.

허브는 살아 있는 연결 목록(ConnectionRegistry)을 소유하고, 모든 변경 명령을
"저장 -> 브로드캐스트" 순서로 처리합니다. 저장과 브로드캐스트는 하나의 락 안에서
실행되므로 어떤 관찰자도 커밋되지 않은 쓰기에 대한 사실을 받지 않습니다.
"""

import asyncio
import enum
import logging

from channels.db import database_sync_to_async
from django.db import DatabaseError

from utils.exceptions import MalformedMessage, NoticeValidationError, TransportError

from .protocol import (
    REJECT_STORE_UNAVAILABLE,
    REJECT_VALIDATION,
    AddNotice,
    CommandRejected,
    DeleteNotice,
    InitialState,
    NoticeAdded,
    NoticeDeleted,
    parse_command,
)
from .serializers import NoticeSerializer
from .store import NoticeStore

logger = logging.getLogger("apps")


class ConnectionState(enum.Enum):
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


class Connection:
    """
    허브에 등록되는 연결 하나.

    하위 클래스는 deliver() 를 구현하고, 전송 실패는 TransportError 로 알립니다.
    close() 는 허브가 연결을 잘라낼 때 호출되며 실제 전송 계층을 닫아야 합니다.
    """

    def __init__(self, name):
        self.name = name
        self.state = ConnectionState.CONNECTING

    async def deliver(self, fact):
        raise NotImplementedError

    async def close(self):
        pass

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name} {self.state.value}>"


class ConnectionRegistry:
    """연결 이름 -> 연결 객체. 연결 시 추가되고 종료 시 제거됩니다."""

    def __init__(self):
        self._connections = {}

    def add(self, connection):
        self._connections[connection.name] = connection

    def discard(self, connection):
        """등록돼 있던 연결이면 제거 후 True, 아니면 False."""
        if self._connections.get(connection.name) is connection:
            del self._connections[connection.name]
            return True
        return False

    def __iter__(self):
        # 브로드캐스트 도중 등록/해제가 일어나도 안전하도록 복사본을 순회합니다.
        return iter(list(self._connections.values()))

    def __len__(self):
        return len(self._connections)

    def __contains__(self, connection):
        return self._connections.get(connection.name) is connection


class NoticeHub:
    def __init__(self, store=None, registry=None):
        self.store = store if store is not None else NoticeStore()
        self.registry = registry if registry is not None else ConnectionRegistry()
        self._lock = asyncio.Lock()

    # -- 저장소 접근 (DB 스레드에서 실행) -------------------------------------------

    def _snapshot(self):
        return [dict(item) for item in NoticeSerializer(self.store.list_all(), many=True).data]

    def _create(self, data):
        return dict(NoticeSerializer(self.store.create(data)).data)

    def _delete(self, notice_id):
        return self.store.delete(notice_id)

    # -- 연결 수명주기 -------------------------------------------------------------

    async def open(self, connection):
        """
        INITIAL_STATE 스냅샷을 보낸 뒤 연결을 브로드캐스트 대상에 등록합니다.

        스냅샷 조회와 등록은 락 안에서 이루어지므로 그 사이의 사실을 놓치거나 중복해서 받지 않습니다.
        스냅샷을 보내지 못하면 False 를 반환하며 연결은 등록되지 않습니다.
        """
        async with self._lock:
            try:
                notices = await database_sync_to_async(self._snapshot)()
            except DatabaseError:
                logger.exception(f"Snapshot for {connection.name} failed")
                connection.state = ConnectionState.CLOSED
                return False
            try:
                await connection.deliver(InitialState(notices))
            except TransportError as e:
                logger.warning(f"Initial state to {connection.name} failed: {e}")
                connection.state = ConnectionState.CLOSED
                return False
            connection.state = ConnectionState.OPEN
            self.registry.add(connection)
        logger.info(f"Client connected: {connection.name} ({len(self.registry)} open)")
        return True

    async def close(self, connection):
        connection.state = ConnectionState.CLOSED
        if self.registry.discard(connection):
            logger.info(f"Client disconnected: {connection.name} ({len(self.registry)} open)")

    # -- 명령 처리 -----------------------------------------------------------------

    async def receive(self, connection, text_data):
        """연결에서 들어온 프레임 하나를 처리합니다. 해석할 수 없는 메시지는 로그만 남기고 무시합니다."""
        try:
            command = parse_command(text_data)
        except MalformedMessage as e:
            logger.warning(f"Ignoring malformed message from {connection.name}: {e}")
            return
        if connection.state is not ConnectionState.OPEN:
            logger.warning(f"Ignoring command from {connection.name} in state {connection.state.value}")
            return

        if isinstance(command, AddNotice):
            await self.add_notice(command, origin=connection)
        elif isinstance(command, DeleteNotice):
            await self.delete_notice(command, origin=connection)
        else:
            raise TypeError(f"unhandled command: {command!r}")

    async def add_notice(self, command, origin=None):
        rejection = None
        async with self._lock:
            try:
                notice = await database_sync_to_async(self._create)(command.notice)
            except NoticeValidationError as e:
                logger.warning(f"ADD_NOTICE rejected: {e.errors}")
                rejection = CommandRejected(command.request_id, REJECT_VALIDATION, e.errors)
            except DatabaseError:
                logger.exception("ADD_NOTICE failed: store unavailable")
                rejection = CommandRejected(command.request_id, REJECT_STORE_UNAVAILABLE)
            else:
                logger.info(f"Notice {notice['id']} added by {notice['author']}")
                await self._broadcast(NoticeAdded(notice))
                return notice
        await self._reject(origin, rejection)
        return None

    async def delete_notice(self, command, origin=None):
        async with self._lock:
            try:
                removed = await database_sync_to_async(self._delete)(command.id)
            except DatabaseError:
                logger.exception(f"DELETE_NOTICE {command.id} failed: store unavailable")
                rejection = CommandRejected(command.request_id, REJECT_STORE_UNAVAILABLE)
            else:
                if removed:
                    logger.info(f"Notice {command.id} deleted")
                else:
                    logger.info(f"Notice {command.id} already absent")
                # 존재하지 않던 id 여도 삭제 사실은 그대로 알립니다.
                await self._broadcast(NoticeDeleted(command.id))
                return removed
        await self._reject(origin, rejection)
        return False

    # -- 전송 ----------------------------------------------------------------------

    async def _broadcast(self, fact):
        for connection in self.registry:
            if connection.state is not ConnectionState.OPEN:
                continue
            try:
                await connection.deliver(fact)
            except TransportError as e:
                logger.warning(f"Dropping {connection.name}: {e}")
                connection.state = ConnectionState.CLOSED
                self.registry.discard(connection)
                await connection.close()

    async def _reject(self, origin, rejection):
        if origin is None or origin.state is not ConnectionState.OPEN:
            return
        try:
            await origin.deliver(rejection)
        except TransportError as e:
            logger.warning(f"Rejection to {origin.name} not delivered: {e}")
