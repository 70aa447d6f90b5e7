"""
Informational endpoints used by the front-end header and sidebar:
mailer/demo versions, npm package details and the sample file listing.
"""

import logging
from importlib.metadata import PackageNotFoundError, version
from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from mailer_demo import config
from mailer_demo.models.npm import PackageDetails
from mailer_demo.services import gmail_mailer
from mailer_demo.services.npm_package_details import fetch_package_details

logger = logging.getLogger(__name__)

router = APIRouter()


class VersionInfo(BaseModel):
    version: str


class SampleFile(BaseModel):
    name: str
    size: int
    url: str


@router.get("/package-version", response_model=VersionInfo)
async def package_version():
    """Version of the Gmail mail client the demo is built on."""
    return VersionInfo(version=gmail_mailer.__version__)


@router.get("/demo-server-version", response_model=VersionInfo)
async def demo_server_version():
    """Installed version of this demo server."""
    try:
        return VersionInfo(version=version(config.DIST_NAME))
    except PackageNotFoundError:
        logger.error(f"Distribution {config.DIST_NAME} is not installed")
        raise HTTPException(status_code=500, detail="Error reading server version")


@router.get("/npm-package-details", response_model=PackageDetails)
async def npm_package_details():
    try:
        return await fetch_package_details(config.PACKAGE_NAME)
    except Exception as exc:
        logger.error(f"Failed to fetch package details for {config.PACKAGE_NAME}: {exc}")
        raise HTTPException(status_code=500, detail="Failed to fetch package details")


@router.get("/files", response_model=List[SampleFile])
async def list_files():
    """
    List the sample files served under /files.

    Returns an empty list when the directory is missing.
    """
    files_dir = config.FILES_DIR
    if not files_dir.is_dir():
        return []

    return [
        SampleFile(name=path.name, size=path.stat().st_size, url=f"/files/{path.name}")
        for path in sorted(files_dir.iterdir())
        if path.is_file() and not path.name.startswith(".")
    ]
