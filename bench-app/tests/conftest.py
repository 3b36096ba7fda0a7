"""
pytest configuration for the Analog Bench console app tests.
- Adds the app directory to sys.path (the app is a flat set of modules).
"""
import os
import sys

_tests_dir = os.path.dirname(__file__)
sys.path.insert(0, os.path.join(_tests_dir, ".."))   # bench-app/
