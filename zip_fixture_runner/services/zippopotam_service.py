from typing import Any
from .http_client import HttpClient
from ..errors import ExtractionError
from ..extraction import extract_string
from ..specs import JSON_CONTENT_TYPE, RequestSpec, ResponseSpec

LOCATION_PATH = "/{country_code}/{zip_code}"
PLACE_NAME_PATH = "places[0].'place name'"

class ZippopotamService:
    def __init__(
        self,
        http_client: HttpClient,
        request_spec: RequestSpec | None = None,
        response_spec: ResponseSpec | None = None,
    ):
        self.http_client = http_client
        self.request_spec = request_spec or RequestSpec()
        self.response_spec = response_spec or ResponseSpec()

    async def get_location(self, country_code: str, zip_code: str) -> Any:
        url = self.request_spec.url_for(LOCATION_PATH, country_code=country_code, zip_code=zip_code)
        response = await self.http_client.get(url, JSON_CONTENT_TYPE, timeout=self.request_spec.timeout)
        self.response_spec.validate(response)
        try:
            return response.json()
        except ValueError as e:
            raise ExtractionError("<body>", f"response is not valid JSON: {e}") from e

    async def get_place_name(self, country_code: str, zip_code: str) -> str:
        location = await self.get_location(country_code, zip_code)
        return extract_string(location, PLACE_NAME_PATH)
