"""Configure test suite environment"""
import os
import sys

# Make the src package importable when running pytest from the project root
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

# Keep test output quiet unless a level is requested explicitly
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "cycle_tracker_tests")
