import httpx


SUCCESS_BODY = '{"messages":[{"id":"wamid.X"}]}'


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, status_code: int = 200, text: str = SUCCESS_BODY):
        self.requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(status_code, text=text)

        super().__init__(handler)
