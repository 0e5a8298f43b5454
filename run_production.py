"""
Production server runner.

Applies Alembic migrations, then runs Uvicorn with multiple workers.
"""
import logging
import multiprocessing
import os
import subprocess
import sys

import uvicorn

logger = logging.getLogger("run_production")

# Formula: (2 x $num_cores) + 1, kept between 2 and 8 workers
CPU_COUNT = multiprocessing.cpu_count()
DEFAULT_WORKERS = min(max(2 * CPU_COUNT + 1, 2), 8)

# Configuration from environment variables
WORKERS = int(os.getenv('UVICORN_WORKERS', DEFAULT_WORKERS))
HOST = os.getenv('API_HOST', '0.0.0.0')
PORT = int(os.getenv('API_PORT', '8000'))
RELOAD = os.getenv('RELOAD', 'false').lower() == 'true'
TIMEOUT_KEEP_ALIVE = int(os.getenv('TIMEOUT_KEEP_ALIVE', '5'))


def run_migrations():
    """Bring the schema up to date before accepting requests."""
    logger.info("Running database migrations...")
    try:
        # sys.executable keeps us on the interpreter of the venv/container
        subprocess.run([sys.executable, "-m", "alembic", "upgrade", "head"], check=True)
    except subprocess.CalledProcessError as e:
        logger.error(f"Error applying database migrations: {e}")
        sys.exit(1)
    logger.info("Database migrations applied successfully")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    run_migrations()

    logger.info(f"Starting tyre service API on {HOST}:{PORT} with {WORKERS} workers (CPU cores: {CPU_COUNT})")
    uvicorn.run(
        "main:create_fastapi_app",
        factory=True,
        host=HOST,
        port=PORT,
        workers=WORKERS,
        reload=RELOAD,
        timeout_keep_alive=TIMEOUT_KEEP_ALIVE,
        log_level="info",
        access_log=True,
    )
