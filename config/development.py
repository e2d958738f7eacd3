import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_PATH = os.getenv("DB_PATH", "./database.db")

# Credentials for POST /admin/login
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "1234")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "5000"))

DEBUG = True

# Create the tables on startup (idempotent: CREATE TABLE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
