import os
import sys
import tempfile
from pathlib import Path

# Add the src directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Set environment variables for testing
os.environ["POOL_SIZE"] = "3"
os.environ["POOL_THREAD_NAME_PREFIX"] = "test-worker"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_DIR"] = os.path.join(tempfile.gettempdir(), "fixedpool-test-logs")
os.environ["LOG_USE_COLOR"] = "false"
