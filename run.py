"""Start the watering control server."""

import sys
from pathlib import Path

import uvicorn

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from common.config import get_config
from common.logger import setup_logging


def main():
    config = get_config()
    setup_logging(config.log_level, log_file=config.log_file, log_dir=config.log_dir)
    uvicorn.run(
        "api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
