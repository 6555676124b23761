"""Quick start example for driverdiag.

This script opens a headless browser, triggers a lookup failure on purpose
and prints the enriched diagnostic message.
"""

import logging
import sys
from pathlib import Path

# Ensure src is in python path for local testing
sys.path.append(str(Path(__file__).parent.parent / "src"))

from driverdiag import ChromiumDriver, WebDriverException, setup_logging

logger = logging.getLogger("driverdiag.quick_start")


def main() -> None:
    """Run the demonstration."""
    setup_logging(level=logging.DEBUG)

    try:
        with ChromiumDriver(profile_dir="./browser_data/quick_start_profile") as driver:
            driver.get("https://example.com")
            logger.info("Loaded page, now looking for an element that does not exist...")
            driver.find("#definitely-not-here", timeout=2)
    except WebDriverException as e:
        e.add_info("Example", "quick_start")
        logger.error(str(e))


if __name__ == "__main__":
    main()
