import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

JSON_SORT_KEYS = False
