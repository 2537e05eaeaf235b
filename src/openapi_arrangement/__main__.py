"""Allow ``python -m openapi_arrangement``."""

from openapi_arrangement.app import main

main()
