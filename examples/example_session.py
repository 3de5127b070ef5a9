"""
Simple script driving a local chromedriver with Bifrost.

Assuming chromedriver is already running in the local environment:
    $ chromedriver --port=9515

Run with:
    python examples/example_session.py
"""

import asyncio

from bifrost import Capabilities, LocatorStrategy, new_driver
from bifrost.logging import setup_logging


async def main() -> None:
    setup_logging(level="DEBUG")

    async with new_driver("http://localhost:9515", timeout=30.0) as driver:
        async with await driver.open_session(Capabilities.chrome(headless=True)) as browser:
            print(f"✓ Session opened: {browser.session_id}")

            await browser.navigate_to("https://example.com/")
            print(f"Current URL: {await browser.current_url()}")

            heading = await browser.find_element(LocatorStrategy.TAG_NAME, "h1")
            print(f"Heading: {await heading.text()}")

            page = await browser.save_screenshot("dist/example.png")
            title = await heading.save_screenshot("dist/example_title.png")
            print(f"✓ Screenshots saved to {page} and {title}")

            await browser.new_window()

    print("✓ Session closed")


if __name__ == "__main__":
    asyncio.run(main())
