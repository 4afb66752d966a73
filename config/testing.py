import os

SECRET_KEY = "test-secret"

DATA_FILE = os.getenv("DATA_FILE", "instance/attendance-test.json")
STORAGE_KEY = "labour_attendance_test"

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True
