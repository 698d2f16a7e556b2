# taskapi/client.py
import os
from typing import Any, Optional

import requests

API = os.getenv("API_URL", "http://localhost:8080")


class TaskClient:
    """Thin requests client for the task routes.

    Non-2xx responses raise ``requests.HTTPError``.
    """

    def __init__(self, base_url: str = API, http: Optional[requests.Session] = None, timeout: float = 30) -> None:
        self.base_url = base_url.rstrip("/")
        self.http = http or requests.Session()
        self.timeout = timeout

    def _call(self, method: str, path: str, **kwargs):
        r = self.http.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        r.raise_for_status()
        return r

    def health(self) -> dict:
        return self._call("GET", "/health").json()

    def create_task(self, title: str, description: str = "", status: str = "Pending") -> Optional[int]:
        r = self._call("POST", "/tasks", json={"title": title, "description": description, "status": status})
        location = r.headers.get("Location", "")
        tail = location.rsplit("/", 1)[-1]
        return int(tail) if tail.isdigit() else None

    def get_task(self, task_id: int) -> dict:
        return self._call("GET", f"/tasks/{task_id}").json()

    def update_task(self, task_id: int, **fields: Any) -> None:
        self._call("PUT", f"/tasks/{task_id}", json={"id": task_id, **fields})

    def delete_task(self, task_id: int) -> None:
        self._call("DELETE", f"/tasks/{task_id}")

    def list_tasks(self) -> list:
        return self._call("GET", "/tasks").json()


def main() -> None:
    client = TaskClient()
    print("--- Smoke testing task API at", client.base_url, "---")
    print("Health:", client.health())
    task_id = client.create_task("Finish API client", "Write a simple requests-based client script")
    print("Create task:", task_id)
    if task_id is not None:
        print("Get task:", client.get_task(task_id))
        client.update_task(task_id, title="Finish API client", status="Completed")
        print("Updated:", client.get_task(task_id))
    print("List tasks:", client.list_tasks())
    if task_id is not None:
        client.delete_task(task_id)
        print("Deleted:", task_id)


if __name__ == "__main__":
    main()
