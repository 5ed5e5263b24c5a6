import httpx

from src.app.utils.custom_exceptions import ProviderError


class ApiService:
    def __init__(self) -> None:
        self.timeout = httpx.Timeout(
            connect=60.0,  # Time to establish a connection
            read=150.0,  # Time to read the response
            write=150.0,  # Time to send data
            pool=60.0,  # Time to wait for a connection from the pool
        )

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout)

    async def post(
        self,
        url: str,
        headers: dict = None,
        data: dict = None,
    ) -> dict:
        """
        Sends an asynchronous POST request with a timeout.
        :param url: The URL to send the request to.
        :param headers: Optional HTTP headers.
        :param data: The payload to send in JSON format.
        :return: The decoded JSON response body.
        :raises ProviderError: On a non-success status, a transport failure
            or a body that is not JSON.
        """
        try:
            async with self._client() as client:
                response = await client.post(url, headers=headers, json=data)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as exc:
            raise ProviderError(
                exc.response.text, provider_status=exc.response.status_code
            ) from exc
        except httpx.RequestError as exc:
            raise ProviderError(
                f"API request failed with error: {str(exc)}"
            ) from exc
        except ValueError as exc:
            raise ProviderError(
                f"API response was not valid JSON: {str(exc)}"
            ) from exc
