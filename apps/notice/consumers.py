from channels.exceptions import ChannelFull
from channels.generic.websocket import AsyncWebsocketConsumer
from django.core.exceptions import ImproperlyConfigured

from utils.exceptions import TransportError

from .hub import Connection
from .protocol import encode_fact


class ConsumerConnection(Connection):
    """컨슈머 자신의 채널로 사실을 전달합니다. 채널 레이어가 채널별 순서를 보장합니다."""

    def __init__(self, consumer):
        super().__init__(consumer.channel_name)
        self.consumer = consumer

    async def deliver(self, fact):
        try:
            await self.consumer.channel_layer.send(
                self.name,
                {"type": "notice.fact", "text": encode_fact(fact)},
            )
        except ChannelFull as e:
            raise TransportError(f"channel {self.name} is full") from e

    async def close(self):
        # 1013: try again later. 클라이언트가 다시 접속해 INITIAL_STATE 를 받게 합니다.
        await self.consumer.close(code=1013)


class NoticeBoardConsumer(AsyncWebsocketConsumer):
    """공지 게시판 웹소켓. 실제 처리는 모두 NoticeHub 에 위임합니다."""

    hub = None

    def __init__(self, *args, hub=None, **kwargs):
        super().__init__(*args, **kwargs)
        if hub is not None:
            self.hub = hub
        self.connection = None

    async def connect(self):
        if self.hub is None:
            raise ImproperlyConfigured("NoticeBoardConsumer requires a hub, use as_asgi(hub=...)")
        await self.accept()
        self.connection = ConsumerConnection(self)
        if not await self.hub.open(self.connection):
            await self.close()

    async def disconnect(self, close_code):
        if self.connection is not None:
            await self.hub.close(self.connection)

    async def receive(self, text_data=None, bytes_data=None):
        await self.hub.receive(self.connection, text_data if text_data is not None else bytes_data)

    async def notice_fact(self, event):
        await self.send(text_data=event["text"])
