import random

from locust import HttpUser, between, task

CATEGORIES = ["Academic", "Event", "Exam", "General", "Emergency"]
SEARCH_TERMS = ["exam", "library", "festival", "schedule"]


class BoardViewer(HttpUser):
    wait_time = between(1, 2)  # 각 작업 사이의 대기 시간 (초)

    # 호스트를 명시적으로 설정하지 않으면 Locust 웹 UI에서 입력해야 합니다.
    # host = "http://localhost:8000"

    def on_start(self):
        """Locust 테스트 시작 시 각 User가 한 번 호출하는 메서드."""
        self.client.headers = {"Accept": "application/json"}

    @task(10)  # 게시판 전체 목록 조회가 가장 잦습니다.
    def list_notices(self):
        response = self.client.get("/api/notices/", name="/api/notices/")
        if response.status_code != 200:
            print(f"Notice list failed: {response.status_code} - {response.text}")

    @task(3)
    def filter_by_category(self):
        category = random.choice(CATEGORIES)
        self.client.get(f"/api/notices/?category={category}", name="/api/notices/?category")

    @task(2)
    def search_notices(self):
        term = random.choice(SEARCH_TERMS)
        self.client.get(f"/api/notices/?search={term}", name="/api/notices/?search")

    @task(1)
    def health(self):
        self.client.get("/api/health", name="/api/health")
