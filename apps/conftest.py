import os

# Django 설정 모듈을 가장 먼저 지정
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.settings")

import django
import factory
import pytest
from channels.routing import URLRouter
from channels.testing import WebsocketCommunicator
from django.urls import path
from faker import Faker
from rest_framework.test import APIClient

# Django 설정을 로드
django.setup()

from apps.notice.consumers import NoticeBoardConsumer  # noqa: E402
from apps.notice.hub import Connection, NoticeHub  # noqa: E402
from apps.notice.models import Notice  # noqa: E402
from apps.notice.store import NoticeStore  # noqa: E402
from utils.exceptions import TransportError  # noqa: E402

fake = Faker()

WEBSOCKET_PATH = "/ws/notices/"


class NoticeFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Notice

    title = factory.Faker("sentence", nb_words=4)
    content = factory.Faker("paragraph")
    category = Notice.Category.GENERAL
    priority = Notice.Priority.MEDIUM
    author = factory.Faker("name")


class FakeConnection(Connection):
    """받은 사실을 메시지 형태로 쌓아두는 테스트용 연결."""

    def __init__(self, name, fail=False):
        super().__init__(name)
        self.received = []
        self.fail = fail
        self.closed = False

    async def deliver(self, fact):
        if self.fail:
            raise TransportError(f"{self.name} is gone")
        self.received.append(fact.to_message())

    async def close(self):
        self.closed = True

    def types(self):
        return [message["type"] for message in self.received]


@pytest.fixture
def api_client():
    client = APIClient()
    return client


@pytest.fixture
def notice_factory(db):
    """
    Notice 인스턴스를 동적으로 생성하는 factory fixture
    예시: notice = notice_factory(title="시험 일정", category="Exam")
    """

    def _create_notice(**kwargs):
        return NoticeFactory.create(**kwargs)

    return _create_notice


@pytest.fixture
def notice_input():
    """ADD_NOTICE 명령의 notice 필드로 쓸 수 있는 유효한 입력값을 만듭니다."""

    def _notice_input(**overrides):
        data = {
            "title": fake.sentence(nb_words=4),
            "content": fake.paragraph(),
            "category": "General",
            "priority": "Medium",
            "author": fake.name(),
        }
        data.update(overrides)
        return data

    return _notice_input


@pytest.fixture
def store():
    return NoticeStore()


@pytest.fixture
def hub(store):
    return NoticeHub(store=store)


@pytest.fixture
def fake_connection():
    def _fake_connection(name=None, fail=False):
        return FakeConnection(name or f"fake.{fake.uuid4()}", fail=fail)

    return _fake_connection


@pytest.fixture
def board_application(hub):
    return URLRouter([path("ws/notices/", NoticeBoardConsumer.as_asgi(hub=hub))])


@pytest.fixture
def connect_client(board_application):
    """게시판 웹소켓에 접속한 WebsocketCommunicator 를 만들어 줍니다. 종료는 테스트에서 직접 합니다."""

    async def _connect_client():
        communicator = WebsocketCommunicator(board_application, WEBSOCKET_PATH)
        connected, _ = await communicator.connect()
        assert connected
        return communicator

    return _connect_client
