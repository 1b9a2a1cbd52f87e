import logging
import sys

from mcp.server.fastmcp import FastMCP

from .errors import HarnessError
from .fixtures import ZIP_CODES_AND_PLACES
from .runner import FixtureRunner
from .services.http_client import HttpClient
from .services.zippopotam_service import ZippopotamService

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("zip-fixture-runner")

# Initialize services
http_client = HttpClient()
zip_service = ZippopotamService(http_client)
runner = FixtureRunner(zip_service)

@mcp.tool()
async def get_place_name(country_code: str, zip_code: str) -> str:
    """Look up the first place name for a zip code.

    Args:
        country_code: Two-letter country code (e.g. us, ca)
        zip_code: The zip or postal code, as the country writes it (e.g. 90210, B2R)
    """
    try:
        return await zip_service.get_place_name(country_code, zip_code)
    except HarnessError as e:
        return f"Unable to look up {country_code}/{zip_code}: {type(e).__name__}: {e}"

@mcp.tool()
async def check_zip_fixtures() -> str:
    """Run the built-in zip code fixtures against the live API and report per case."""
    report = await runner.run(ZIP_CODES_AND_PLACES)
    return report.summary()

@mcp.resource("fixtures://zip_codes_and_places")
def get_zip_codes_and_places() -> str:
    return "\n".join(
        f"{case.country_code},{case.zip_code},{case.expected_place_name}"
        for case in ZIP_CODES_AND_PLACES
    )

def main():
    # stdout carries the stdio transport
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting zip-fixture-runner MCP server")
    mcp.run(transport='stdio')

if __name__ == "__main__":
    main()
