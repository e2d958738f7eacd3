import os

SECRET_KEY = "test-secret"

DB_PATH = os.getenv("DB_PATH", "./test_database.db")

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "1234"

HOST = "127.0.0.1"
PORT = 5000

DEBUG = False
TESTING = True

AUTO_INIT_DB = True
