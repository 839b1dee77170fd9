#!/usr/bin/env python3
"""
Example: Search an application's accounts and map a directory to it.

Requirements:
- STORMPATH_API_KEY_ID / STORMPATH_API_KEY_SECRET for HTTP basic auth
- STORMPATH_APPLICATION_HREF pointing at an existing application
- STORMPATH_DIRECTORY_HREF pointing at an existing directory
"""

import logging
import os
import sys

from stormpath_client import (
    ClientConfig,
    CriteriaFilter,
    StormpathClient,
    StormpathError,
    new_account_store_mapping,
    new_page_request,
    new_post_request,
    new_request,
)


logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main() -> int:
    application_href = os.environ["STORMPATH_APPLICATION_HREF"]
    directory_href = os.environ["STORMPATH_DIRECTORY_HREF"]

    with StormpathClient(ClientConfig.from_env()) as client:
        client.session.auth = (os.environ["STORMPATH_API_KEY_ID"], os.environ["STORMPATH_API_KEY_SECRET"])

        accounts = client.send(new_request(
            "GET",
            f"{application_href}/accounts",
            new_page_request(10, 0),
            CriteriaFilter(status="ENABLED", order_by="surname asc"),
        )).json()
        for account in accounts.get("items", []):
            logger.info(f"{account.get('username')} <{account.get('email')}>")

        mapping = new_account_store_mapping(application_href, directory_href)
        mapping.list_index = 0
        created = client.send(new_post_request("/accountStoreMappings", mapping)).json()
        logger.info(f"Created account store mapping {created.get('href')}")

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except StormpathError as e:
        logger.error(f"Request failed: {e}")
        sys.exit(1)
