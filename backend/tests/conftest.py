"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real document store by accident
os.environ.setdefault("MONGO_URI", "mongodb://127.0.0.1:1/?directConnection=true")
os.environ.setdefault("MONGO_DATABASE", "predictor_api_test")
os.environ.setdefault("LOG_FORMAT", "text")
