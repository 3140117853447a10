import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Single JSON document holding the whole roster
DATA_FILE = os.getenv("DATA_FILE", "attendance_data.json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
