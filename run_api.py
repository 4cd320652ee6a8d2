"""
Main entry point for the Taskboard API.

Usage:
    python run_api.py

Or with uvicorn directly:
    uvicorn taskboard.api_app:app --host 0.0.0.0 --port 5001 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from taskboard.config.settings import Config, get_config

if __name__ == "__main__":
    debug = get_config(Config.APP_ENV).DEBUG

    print(f"Starting Taskboard API in {Config.APP_ENV} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "taskboard.api_app:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
