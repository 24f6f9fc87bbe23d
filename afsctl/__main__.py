import asyncio

from afsctl.config import setup_logger
from afsctl.tui.app import AfsctlApp


async def main() -> None:
    """The main entry point for the application.
    """
    setup_logger()

    app = AfsctlApp()

    try:
        await app.run_async()
    finally:
        app.service.close()


if __name__ == '__main__':
    asyncio.run(main())
