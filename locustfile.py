from locust import HttpUser, task, between

API_V1_STR = "/api/v1"

class NewsReader(HttpUser):
    wait_time = between(0, 1)

    @task
    def read_latest_news(self):
        self.client.get(f"{API_V1_STR}/news")
