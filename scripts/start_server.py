"""Start the API server"""

import asyncio
import sys
import logging

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def check_environment():
    """Check the runtime environment"""
    logger.info("Checking environment...")

    if sys.version_info < (3, 10):
        logger.error(f"Python too old: {sys.version_info}, 3.10+ required")
        return False

    try:
        import fastapi
        import httpx
        import pydantic
        import aiofiles
        logger.info("✅ All required packages installed")
        return True
    except ImportError as e:
        logger.error(f"❌ Missing package: {e}")
        logger.error("Run: pip install -e .")
        return False


def main():
    try:
        if not check_environment():
            sys.exit(1)

        from rail_seat_guide.server import main_server

        logger.info("🚀 Starting rail seat guide server...")
        asyncio.run(main_server())

    except ImportError as e:
        logger.error(f"❌ Import error: {e}")
        logger.error("Make sure the package is installed: pip install -e .")
        sys.exit(1)
    except Exception as e:
        logger.exception(f"❌ Startup failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
