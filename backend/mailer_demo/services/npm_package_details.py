"""
npm registry lookup for the showcased mailer package.

Two calls per lookup:
  GET https://registry.npmjs.org/<name>                                 metadata
  GET https://api.npmjs.org/downloads/range/<created>:<today>/<name>    daily downloads
"""

import logging
from datetime import date, datetime
from typing import Any, Optional

import httpx

from mailer_demo.models.npm import PackageDetails

logger = logging.getLogger(__name__)

NPM_REGISTRY_URL = "https://registry.npmjs.org"
NPM_DOWNLOADS_URL = "https://api.npmjs.org/downloads/range"
NPM_PACKAGE_PAGE_URL = "https://www.npmjs.com/package"


class NpmRegistryError(Exception):
    """Raised when the registry answers with an error payload."""


def _iso_date(timestamp: str) -> str:
    """'2024-04-20T10:11:12.345Z' -> '2024-04-20'."""
    return datetime.fromisoformat(timestamp.replace("Z", "+00:00")).date().isoformat()


async def fetch_data(client: httpx.AsyncClient, url: str) -> Any:
    response = await client.get(url)
    data = response.json()
    if isinstance(data, dict) and data.get("error"):
        raise NpmRegistryError(data["error"])
    return data


async def fetch_package_details(
    package_name: str,
    client: Optional[httpx.AsyncClient] = None,
) -> PackageDetails:
    """
    Fetch metadata and all-time download counts for an npm package.

    Raises:
        NpmRegistryError: the registry returned an error payload
        httpx.HTTPError: transport failure
    """
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=15.0)

    try:
        metadata = await fetch_data(client, f"{NPM_REGISTRY_URL}/{package_name}")

        start_date = _iso_date(metadata["time"]["created"])
        end_date = date.today().isoformat()
        download_data = await fetch_data(
            client,
            f"{NPM_DOWNLOADS_URL}/{start_date}:{end_date}/{package_name}",
        )
    finally:
        if owns_client:
            await client.aclose()

    logger.info(f"Fetched npm details for {package_name}")
    return format_response(package_name, metadata, download_data)


def format_response(package_name: str, metadata: dict, download_data: dict) -> PackageDetails:
    """Shape raw registry metadata and download counts into PackageDetails."""
    latest_version = metadata["dist-tags"]["latest"]
    version_data = metadata.get("versions", {}).get(latest_version, {})
    total_downloads = sum(day.get("downloads", 0) for day in download_data.get("downloads", []))

    repository = version_data.get("repository")
    repository_url = repository.get("url") if isinstance(repository, dict) else repository
    author = version_data.get("author")
    author_name = author.get("name") if isinstance(author, dict) else author
    license_name = version_data.get("license")
    if isinstance(license_name, dict):
        license_name = license_name.get("type")

    return PackageDetails(
        packageName=package_name,
        totalDownloads=total_downloads,
        firstPublishDate=_iso_date(metadata["time"]["created"]),
        latestVersion=latest_version,
        lastUpdated=_iso_date(metadata["time"][latest_version]),
        license=license_name or "No license specified",
        repositoryUrl=repository_url or "No repository URL",
        authorName=author_name or "No author specified",
        description=version_data.get("description") or "No description available",
        keywords=version_data.get("keywords") or [],
        npmUrl=f"{NPM_PACKAGE_PAGE_URL}/{package_name}",
        readme=metadata.get("readme") or "No README available",
    )
