"""Test session setup shared by every test module."""
import os
import sys

project_root = os.path.abspath(os.path.dirname(__file__))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

# Tests pick their record store explicitly and must not read real settings
os.environ.pop('TRACKER_TABLE_NAME', None)
for name in [key for key in os.environ if key.startswith('CYCLE_')]:
    os.environ.pop(name)
os.environ.setdefault('POWERTOOLS_SERVICE_NAME', 'cyclekit-tests')
os.environ.setdefault('LOG_LEVEL', 'DEBUG')
