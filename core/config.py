# core/config.py
import os

SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ALGORITHM = os.getenv("ALGORITHM", "HS256")

# upstream cart API (owns the canonical cart)
CART_API_URL = os.getenv("CART_API_URL", "http://localhost:8080/api")
CART_API_TIMEOUT = float(os.getenv("CART_API_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
