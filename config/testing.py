import os

SECRET_KEY = "test-secret"

# Tests normally override this with a tmp_path file.
DATA_FILE = os.getenv("DATA_FILE", "test_attendance_data.json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
TESTING = True
