"""
npm registry package summary shown in the front-end sidebar.
"""

from typing import List

from pydantic import BaseModel


class PackageDetails(BaseModel):
    """
    Formatted npm metadata for one package.

    Field names are camelCase because scripts.js binds them directly
    (data.packageName, data.totalDownloads, ...).
    """

    packageName: str
    totalDownloads: int
    firstPublishDate: str  # YYYY-MM-DD
    latestVersion: str
    lastUpdated: str  # YYYY-MM-DD
    license: str
    repositoryUrl: str
    authorName: str
    description: str
    keywords: List[str] = []
    npmUrl: str
    readme: str
